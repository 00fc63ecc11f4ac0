from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from knxcore.config import KnxConfig
from knxcore.errors import KNXError
from knxcore.logs import setup_logging

from .bitset import BitSetTranslator
from .registry import list_subtypes


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="knx-b8", description="KNX DPT 21.xxx — 8-bit set translator")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true", default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="Subtypes enregistrés")

    enc = sub.add_parser("encode", help="Texte(s) → octets (hex)")
    enc.add_argument("--dpt", default=None, help="Subtype, ex. 21.001 (défaut: KNX_B8_DEFAULT_DPT)")
    enc.add_argument("values", nargs="+", help='Un item par argument, ex. "0x08" "1 1 0 1" "Fault InAlarm"')

    dec = sub.add_parser("decode", help="Octets (hex) → texte")
    dec.add_argument("--dpt", default=None, help="Subtype, ex. 21.001 (défaut: KNX_B8_DEFAULT_DPT)")
    dec.add_argument("data", help='Octets en hexa, ex. "0d08" ou "0d 08"')
    return p.parse_args(argv)


def _cmd_list() -> int:
    for d in list_subtypes():
        print(f"{d.id:<8} {d.description:<34} {' '.join(d.flag_names)}")
    return 0


def _cmd_encode(t: BitSetTranslator, values: list[str]) -> int:
    t.set_values(values)
    logging.info("%s: %d item(s) encodé(s)", t.dpt.id, t.item_count)
    print(t.get_data().hex(" "))
    return 0


def _cmd_decode(t: BitSetTranslator, data: str) -> int:
    try:
        raw = bytes.fromhex(data)
    except ValueError as e:
        logging.error("Octets hexa illisibles %r: %s", data, e)
        return 2
    t.set_data(raw)
    for i, text in enumerate(t.get_all_values()):
        print(f"{raw[i]:3d}  {text}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = KnxConfig.from_env().override(
        default_dpt=getattr(args, "dpt", None),
        log_file=Path(args.log_file) if args.log_file else None,
        verbose=args.verbose,
    )
    setup_logging(cfg.log_file, verbose=cfg.verbose)

    if args.cmd == "list":
        return _cmd_list()
    try:
        t = BitSetTranslator(cfg.default_dpt)
        logging.debug("translator %s", t.dpt)
        if args.cmd == "encode":
            return _cmd_encode(t, args.values)
        return _cmd_decode(t, args.data)
    except KNXError as e:
        logging.error("Échec %s: %s", args.cmd, e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
