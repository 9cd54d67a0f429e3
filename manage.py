import argparse
import sys

from bootstrap_form.core_services.Doctype import DECLARATIONS
from bootstrap_form.core_services.ErrorHandler import ErrorHandler
from bootstrap_form.core_services.Settings import Settings
from bootstrap_form.form.Exceptions import BootstrapFormError
from bootstrap_form.utilities.FormSpec import load_form_spec, render_form_spec
from bootstrap_form.view.Renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bootstrap form tools")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a form described by a JSON spec")
    render_parser.add_argument("spec", help="Path to the JSON form spec")
    render_parser.add_argument("--indent", default=None, help="Spaces (or a literal string) in front of every line")
    render_parser.add_argument("--doctype", choices=sorted(DECLARATIONS), type=str.upper, help="Doctype to render for")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        settings = Settings.from_env()
        if args.doctype:
            settings.doctype = args.doctype
        if args.indent is not None:
            settings.indent = int(args.indent) if args.indent.isdigit() else args.indent

        error_handler = ErrorHandler(log_to_file=settings.log_file, log_level=settings.log_level)
        renderer = Renderer(translator=settings.build_translator(), doctype=settings.doctype,
                            text_domain=settings.text_domain)

        exit_code = 0

        def report(message, e):
            nonlocal exit_code
            print(f"Error: {message}: {e}", file=sys.stderr)
            exit_code = 1

        with error_handler.handle_errors(
            {
                BootstrapFormError: "Unable to render the form spec",
                OSError: "Unable to read the form spec",
                ValueError: "The form spec is not valid JSON",
            },
            fallback=report,
        ):
            print(render_form_spec(load_form_spec(args.spec), renderer, settings.indent), end="")
        return exit_code

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
