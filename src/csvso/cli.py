import argparse
from typing import Any, Dict, List, Optional

from fastapi import Request

from csvso.adapters.csv_adapter import DEFAULT_CSV_ENCODING
from csvso.execution.config_executor import ConfigExecutor
from csvso.execution.request import DEFAULT_OUTPUT_FOLDER
from csvso.router import route
from csvso.utils.exceptions import CsvSOError


class CLIRequest(Request):
    """
    Minimal Request wrapper for CLI execution.
    Provides headers for identity extraction.
    """

    def __init__(self, user_id: str = "cli_user"):
        scope = {
            "type": "http",
            "headers": [],
        }
        super().__init__(scope)
        self._user_id = user_id

    @property
    def headers(self):
        return {"x-user-id": self._user_id}


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


def cprint(text: str, color: str = C.RESET, bold: bool = False):
    prefix = (C.BOLD if bold else "") + color
    print(f"{prefix}{text}{C.RESET}")


def _build_payload_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "csv_path": args.csv,
        "output_folder": args.output_folder,
        "namespace": args.namespace,
        "implement_identifiable": args.identifiable,
        "csv_encoding": args.encoding,
        "base_name": args.base_name,
        "export_path": getattr(args, "out", None),
        "user_id": args.user_id,
    }


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--csv", help="Schema-declaring CSV file")
    parser.add_argument("--output-folder", default=DEFAULT_OUTPUT_FOLDER)
    parser.add_argument("--namespace", default="", help="Namespace for the generated class")
    parser.add_argument(
        "--identifiable",
        action="store_true",
        help="Implement IIdentifiableSO when an 'id' column exists",
    )
    parser.add_argument("--encoding", default=DEFAULT_CSV_ENCODING, help="CSV text encoding")
    parser.add_argument("--base-name", help="Address a generated type without its CSV")
    parser.add_argument("--user-id", default="cli_user")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvso",
        description="CSV to ScriptableObject Utility",
    )
    parser.add_argument("--config", help="Path to YAML run configuration")

    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Generate the <Name>SO class from the CSV header lines")
    _add_common_arguments(gen)

    imp = sub.add_parser("import", help="Import CSV data rows into the <Name>SO asset")
    _add_common_arguments(imp)

    exp = sub.add_parser("export", help="Export the <Name>SO asset to CSV")
    _add_common_arguments(exp)
    exp.add_argument("--out", help="Destination CSV path (default: <Name>.csv)")

    return parser


def _run_config(config_path: str) -> None:
    results = ConfigExecutor(config_path).execute()
    for result in results:
        cprint(f"[DONE] {result.get('action')}: {result.get('message')}", C.GREEN, bold=True)


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.config and not args.command:
        parser.print_help()
        raise SystemExit(2)

    try:
        if args.config:
            cprint(f"\n[START] Running config {args.config}", C.BLUE, bold=True)
            _run_config(args.config)
            return

        action = args.command.upper()
        payload = _build_payload_from_args(args)
        request = CLIRequest(user_id=args.user_id)

        cprint(f"\n[START] {action}", C.BLUE, bold=True)
        cprint(f"[INFO] CSV={payload.get('csv_path')}  Output={payload.get('output_folder')}", C.DIM)

        response = route(action, payload, request)

        cprint(f"[SUCCESS] {response.get('message')}", C.GREEN, bold=True)

    except (CsvSOError, ValueError, FileNotFoundError) as e:
        cprint("\n[FAILED] Operation failed.", C.RED, bold=True)
        cprint(str(e), C.RED)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
