import argparse
import json
import logging

import psutil

from .soc import get_soc_info


def build_parser():
    parser = argparse.ArgumentParser(
        description="socinfo: Hardware summary tool for Apple Silicon"
    )
    parser.add_argument(
        "--specs",
        action="store_true",
        help="Also show nominal CPU/GPU max power and memory bandwidth",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the full record as JSON"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log program invocations to stderr"
    )
    return parser


def convert_to_GB(value):
    return round(value / 1024 / 1024 / 1024, 1)


def _is_supported_host():
    return bool(psutil.MACOS)


def _format_figure(value, unit):
    if value is None:
        return "n/a"
    return "{} {}".format(value, unit)


def format_summary(soc_info, ram_GB=None, show_specs=False):
    summary = "{} with {} CPU cores ({}P+{}E) and {} GPU cores".format(
        soc_info.cpu_brand_name,
        soc_info.num_cpu_cores,
        soc_info.num_performance_cores,
        soc_info.num_efficiency_cores,
        soc_info.num_gpu_cores,
    )
    if ram_GB is not None:
        summary = "{}, {} GB RAM".format(summary, ram_GB)
    if show_specs:
        summary = "{}. CPU max power: {}, GPU max power: {}, CPU bandwidth: {}, GPU bandwidth: {}".format(
            summary,
            _format_figure(soc_info.cpu_max_power, "W"),
            _format_figure(soc_info.gpu_max_power, "W"),
            _format_figure(soc_info.cpu_max_bw, "GB/s"),
            _format_figure(soc_info.gpu_max_bw, "GB/s"),
        )
    return summary


def main(args=None, executor=None):
    if args is None:
        args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s"
        )
    if not _is_supported_host():
        print("socinfo requires macOS on Apple Silicon.")
        return 1
    try:
        soc_info = get_soc_info(executor)
    except KeyboardInterrupt:
        print("Stopping...")
        return 130

    if args.json:
        print(json.dumps(soc_info.to_dict(), indent=2))
    else:
        ram_GB = convert_to_GB(psutil.virtual_memory().total)
        print(format_summary(soc_info, ram_GB=ram_GB, show_specs=args.specs))
    return 0


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return main(args)
    except Exception as e:
        print(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(cli())
