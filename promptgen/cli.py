"""Command-line interface for checking, compiling and playing dialogue scripts."""

import argparse
import logging
import sys
from pathlib import Path

from promptgen import __version__
from promptgen.config import PromptgenConfig
from promptgen.core.errors import ParseError, ScriptFormatError
from promptgen.core.models import Prompt
from promptgen.core.parser import parse_file
from promptgen.core.writer import compile_script_file, dump_script
from promptgen.resources.library import ScriptLibrary
from promptgen.runtime.events import DialogueEvent
from promptgen.runtime.session import END_OF_SCRIPT, NO_MATCHING_LABEL, DialogueSession

QUIT_COMMANDS = {"q", "quit", "exit"}

END_MESSAGES = {
    END_OF_SCRIPT: "The end.",
    NO_MATCHING_LABEL: "The story has no way forward from here.",
}


def _load(file_path: str, config: PromptgenConfig) -> list[Prompt]:
    """Parse a script file, exiting with a located error message on failure."""
    path = Path(file_path)
    if not path.is_file():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        raise SystemExit(1)

    try:
        return parse_file(path, encoding=config.encoding)
    except ParseError as e:
        print(f"{file_path}:{e}", file=sys.stderr)
        raise SystemExit(1)
    except UnicodeDecodeError as e:
        print(f"Error: Cannot decode {file_path} as {config.encoding}: {e}", file=sys.stderr)
        raise SystemExit(1)


def cmd_check(args):
    """Parse a script and report what it contains."""
    prompts = _load(args.file, args.config)
    responses = sum(len(p.responses) for p in prompts)
    labeled = sum(1 for p in prompts if p.label is not None)
    print(f"{args.file}: {len(prompts)} prompts ({labeled} labeled), {responses} responses")


def cmd_compile(args):
    """Compile a script to JSON."""
    # Parse first so syntax errors get the same message as `check`
    _load(args.file, args.config)
    output = compile_script_file(args.file, args.output, encoding=args.config.encoding)
    print(f"Compiled {args.file} -> {output}")


def cmd_format(args):
    """Print the canonical text form of a script."""
    prompts = _load(args.file, args.config)
    try:
        sys.stdout.write(dump_script(prompts))
    except ScriptFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)


def _show_prompt(event):
    prompt = event["prompt"]
    print()
    print(prompt.text)
    for number, response in enumerate(prompt.responses, start=1):
        print(f"  {number}. {response.text}")


def cmd_play(args):
    """Play a script interactively on the terminal."""
    prompts = _load(args.file, args.config)

    session = DialogueSession(config=args.config)
    session.events.subscribe(DialogueEvent.PROMPT_ENTERED, _show_prompt)

    if not session.begin(prompts):
        print(f"Error: {args.file} contains no prompts", file=sys.stderr)
        raise SystemExit(1)

    while session.is_active:
        prompt = session.current
        if not prompt.has_responses:
            session.end(END_OF_SCRIPT)
            break

        try:
            choice = input("> ").strip()
        except EOFError:
            session.end()
            break

        if choice.lower() in QUIT_COMMANDS:
            session.end()
            break

        if not choice.isdigit() or not 1 <= int(choice) <= len(prompt.responses):
            print(f"Choose a number between 1 and {len(prompt.responses)}, or q to quit.")
            continue

        session.choose(int(choice) - 1)

    message = END_MESSAGES.get(session.end_reason)
    if message:
        print()
        print(message)


def cmd_list(args):
    """List the scripts in a directory."""
    library = ScriptLibrary(args.directory, config=args.config)
    library.load_all()

    if not len(library):
        print("No scripts found.")
        return

    for script_id in library:
        print(f"  {script_id:<24} {len(library.get(script_id))} prompts")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="promptgen",
        description="Check, compile and play branching dialogue scripts",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    parser.add_argument("--start-label", default="START", help="Label of the first prompt (default: START)")
    parser.add_argument("--encoding", default="utf-8", help="Script file encoding")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check a script for syntax errors")
    check_parser.add_argument("file", help="Path to the script")
    check_parser.set_defaults(func=cmd_check)

    compile_parser = subparsers.add_parser("compile", help="Compile a script to JSON")
    compile_parser.add_argument("file", help="Path to the script")
    compile_parser.add_argument("-o", "--output", help="Output path (default: script name with .json)")
    compile_parser.set_defaults(func=cmd_compile)

    format_parser = subparsers.add_parser("format", help="Print a script in canonical form")
    format_parser.add_argument("file", help="Path to the script")
    format_parser.set_defaults(func=cmd_format)

    play_parser = subparsers.add_parser("play", help="Play a script interactively")
    play_parser.add_argument("file", help="Path to the script")
    play_parser.set_defaults(func=cmd_play)

    list_parser = subparsers.add_parser("list", help="List the scripts in a directory")
    list_parser.add_argument("directory", help="Script directory")
    list_parser.set_defaults(func=cmd_list)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    args.config = PromptgenConfig(start_label=args.start_label, encoding=args.encoding)
    args.func(args)
