import argparse
import logging
import sys
from pathlib import Path

from application.errors import StoreError
from application.services import ImportMode, TransferService, export_filename
from backend.settings import get_settings
from backend.storage import create_document_store
from infrastructure.security import generate_user_id


def _transfer_service() -> TransferService:
    settings = get_settings()
    store = create_document_store(settings)
    return TransferService(store=store, new_id=generate_user_id, indent=settings.export_indent)


def _export(args) -> None:
    content = _transfer_service().export_document()
    output = args.output or export_filename()
    if output == "-":
        print(content)
        return
    Path(output).write_text(content, encoding="utf-8")
    print(f"Exported to {output}")


def _import(args) -> None:
    content = Path(args.input).read_text(encoding="utf-8")
    mode = ImportMode.MERGE if args.merge else ImportMode.OVERWRITE
    _transfer_service().import_document(content, mode)
    print(f"Imported {args.input} ({mode.value})")


def _reset(args) -> None:
    _transfer_service().reset()
    print("Document reset")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export, import or reset the workout diary document")
    commands = parser.add_subparsers(dest="command", required=True)

    export_cmd = commands.add_parser("export", help="Write the document to a JSON file")
    export_cmd.add_argument("-o", "--output", help="Output path, '-' for stdout (default: workout-db-<date>.json)")
    export_cmd.set_defaults(handler=_export)

    import_cmd = commands.add_parser("import", help="Load a previously exported document")
    import_cmd.add_argument("input", help="Input JSON file path")
    import_cmd.add_argument("--merge", action="store_true", help="Merge with existing users instead of overwriting")
    import_cmd.set_defaults(handler=_import)

    reset_cmd = commands.add_parser("reset", help="Delete all accounts and entries")
    reset_cmd.set_defaults(handler=_reset)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_settings().log_level)

    try:
        args.handler(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except StoreError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
