# packages/knxdpt/src/knxdpt/catalog.py
# -----------------------------------------------------------------------------
# Catalogue des subtypes 21.xxx. L'ordre de déclaration des membres = ordre des
# bits (bit 0 en premier).
from __future__ import annotations

from enum import IntFlag

from .dpt import BitSetDpt
from .registry import register


# -----------------------------------------------------------------------------
# Common use
# -----------------------------------------------------------------------------
class GeneralStatus(IntFlag):
    OutOfService = 1
    Fault = 2
    Overridden = 4
    InAlarm = 8
    AlarmUnAck = 16


class DeviceControl(IntFlag):
    UserStopped = 1
    OwnIndAddress = 2
    VerifyMode = 4


DptGeneralStatus = BitSetDpt.from_flag("21.001", GeneralStatus)
DptDeviceControl = BitSetDpt.from_flag("21.002", DeviceControl)


# -----------------------------------------------------------------------------
# HVAC
# -----------------------------------------------------------------------------
class ForcingSignal(IntFlag):
    ForceRequest = 1
    Protection = 2
    Oversupply = 4
    Overrun = 8
    DhwNorm = 16
    DhwLegio = 32
    RoomHComfort = 64
    RoomHMax = 128


class ForcingSignalCool(IntFlag):
    ForceRequest = 1


class RoomHeatingControllerStatus(IntFlag):
    Fault = 1
    StatusEco = 2
    TempFlowLimit = 4
    TempReturnLimit = 8
    StatusMorningBoost = 16
    StatusStartOptim = 32
    StatusStopOptim = 64
    SummerMode = 128


class SolarDhwControllerStatus(IntFlag):
    Fault = 1
    SdhwLoadActive = 2
    SolarLoadSufficient = 4


class FuelTypeSet(IntFlag):
    Oil = 1
    Gas = 2
    SolidState = 4


class RoomCoolingControllerStatus(IntFlag):
    Fault = 1


class VentilationControllerStatus(IntFlag):
    Fault = 1
    FanActive = 2
    Heat = 4
    Cool = 8


DptForcingSignal = BitSetDpt.from_flag("21.100", ForcingSignal)
DptForcingSignalCool = BitSetDpt.from_flag("21.101", ForcingSignalCool)
DptRoomHeatingControllerStatus = BitSetDpt.from_flag("21.102", RoomHeatingControllerStatus)
DptSolarDhwControllerStatus = BitSetDpt.from_flag("21.103", SolarDhwControllerStatus)
DptFuelTypeSet = BitSetDpt.from_flag("21.104", FuelTypeSet)
DptRoomCoolingControllerStatus = BitSetDpt.from_flag("21.105", RoomCoolingControllerStatus)
DptVentilationControllerStatus = BitSetDpt.from_flag("21.106", VentilationControllerStatus)


# -----------------------------------------------------------------------------
# Lighting
# -----------------------------------------------------------------------------
class LightActuatorErrorInfo(IntFlag):
    LoadDetectionError = 1
    Undervoltage = 2
    Overcurrent = 4
    Underload = 8
    DefectiveLoad = 16
    LampFailure = 32
    Overheat = 64


DptLightActuatorErrorInfo = BitSetDpt.from_flag("21.601", LightActuatorErrorInfo)


# -----------------------------------------------------------------------------
# System
# -----------------------------------------------------------------------------
class RFCommModeInfo(IntFlag):
    Asynchronous = 1
    BiBatMaster = 2
    BiBatSlave = 4


class RFFilterModeSelect(IntFlag):
    DoA = 1
    KnxSn = 2
    DoAAndKnxSn = 4


class ChannelActivation8(IntFlag):
    Channel1 = 1
    Channel2 = 2
    Channel3 = 4
    Channel4 = 8
    Channel5 = 16
    Channel6 = 32
    Channel7 = 64
    Channel8 = 128


DptRFCommModeInfo = BitSetDpt.from_flag("21.1000", RFCommModeInfo, "RF Communication Mode Info")
DptRFFilterModeSelect = BitSetDpt.from_flag("21.1001", RFFilterModeSelect, "RF Filter Mode Select")
DptChannelActivation8 = BitSetDpt.from_flag("21.1010", ChannelActivation8, "Channel Activation for 8 channels")

ALL_SUBTYPES: tuple[BitSetDpt, ...] = (
    DptGeneralStatus, DptDeviceControl,
    DptForcingSignal, DptForcingSignalCool, DptRoomHeatingControllerStatus,
    DptSolarDhwControllerStatus, DptFuelTypeSet, DptRoomCoolingControllerStatus,
    DptVentilationControllerStatus,
    DptLightActuatorErrorInfo,
    DptRFCommModeInfo, DptRFFilterModeSelect, DptChannelActivation8,
)


def register_all() -> list[str]:
    for dpt in ALL_SUBTYPES:
        register(dpt)
    return [d.id for d in ALL_SUBTYPES]
