#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI entrypoint for codebundle.

Commands:

    codebundle bundle      → concatenate matching source files into one file
    codebundle create-rsp  → write a response file replaying a bundle request
    codebundle @file.rsp   → replay a response file
"""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path

from codebundle import __version__
from codebundle.bundler import BundleRequest, bundle, sort_mode
from codebundle.errors import CodeBundleError
from codebundle.languages import LANGUAGE_EXTENSIONS, resolve_extensions, split_csv
from codebundle.rsp import write_rsp


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def str2bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


class RspArgumentParser(argparse.ArgumentParser):
    """Reads @file arguments as shell-quoted command lines."""

    def convert_arg_line_to_args(self, arg_line):
        return shlex.split(arg_line)


# ============================================================
# Parser
# ============================================================

def add_bundle_options(p: argparse.ArgumentParser):
    langs = ", ".join(list(LANGUAGE_EXTENSIONS) + ["all"])
    p.add_argument("--language", nargs="+", action="extend", required=True,
                   help=f"languages to include ({langs}); comma lists allowed")
    p.add_argument("--output", required=True,
                   help="path of the bundle file")
    p.add_argument("--note", nargs="?", const=True, default=False, type=str2bool,
                   help="write a '# Source:' line before each file")
    p.add_argument("--sort", nargs="*", default=None,
                   help="order files by 'name' (default) or 'type'")
    p.add_argument("--remove-empty-lines", nargs="?", const=True, default=False,
                   type=str2bool, help="drop blank and whitespace-only lines")
    p.add_argument("--author", nargs="?", const="", default=None,
                   help="write a leading '# Author:' line")
    p.add_argument("--root", default=None,
                   help="directory to search (default: current directory)")
    p.add_argument("-q", "--quiet", action="store_true",
                   help="no progress bar or info messages")


def build_parser() -> argparse.ArgumentParser:
    p = RspArgumentParser(
        prog="codebundle",
        description="codebundle: bundle source files into a single file",
        fromfile_prefix_chars="@",
    )
    p.add_argument("--version", action="version",
                   version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", metavar="command")
    sub.required = True

    b = sub.add_parser("bundle", help="concatenate source files into one file")
    add_bundle_options(b)
    b.set_defaults(func=run_bundle)

    r = sub.add_parser("create-rsp",
                       help="write a response file for the bundle command")
    add_bundle_options(r)
    r.set_defaults(func=run_create_rsp)

    return p


# ============================================================
# Commands
# ============================================================

def info(args, msg: str):
    if not args.quiet:
        print(f"[info] {msg}")


def run_bundle(args) -> int:
    try:
        mode = sort_mode(split_csv(args.sort))
    except ValueError as e:
        print(f"[error] {e}")
        return EXIT_USAGE

    root = Path(args.root) if args.root else Path.cwd()

    try:
        req = BundleRequest(
            extensions=resolve_extensions(split_csv(args.language)),
            output=Path(args.output),
            note=args.note,
            sort=mode,
            remove_empty_lines=args.remove_empty_lines,
            author=args.author,
            root=root,
        )
        result = bundle(req, progress=not args.quiet)
    except CodeBundleError as e:
        print(f"[error] {e}")
        return EXIT_FAILED

    info(args, f"Bundled {result.count} files into {args.output}")
    return EXIT_OK


def run_create_rsp(args) -> int:
    try:
        path = write_rsp(
            split_csv(args.language),
            args.output,
            note=args.note,
            sort=split_csv(args.sort),
            remove_empty_lines=args.remove_empty_lines,
            author=args.author,
        )
    except CodeBundleError as e:
        print(f"[error] {e}")
        return EXIT_FAILED

    info(args, f"Created response file: {path}")
    return EXIT_OK


def main(argv=None) -> int:
    """
    Dispatcher for the `codebundle` command.
    """
    args = build_parser().parse_args(argv)

    if not args.output or not args.output.strip():
        print("[error] --output must name the file to write")
        return EXIT_USAGE

    return args.func(args)


# Allow running: python -m codebundle.cli
if __name__ == "__main__":
    sys.exit(main())
