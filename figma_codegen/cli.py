"""Command-line front-end: fetch (or load) a design, generate, write files.

Usage:
    # Fetch a frame from Figma (FIGMA_TOKEN must be set):
    figma-codegen 6kGd851qaAX4TiL44vpIrO --node-id 16650:538 --output-dir out

    # Generate from an exported document instead:
    figma-codegen --input design.json --format vue --no-typescript

    # Settings from a JSON config file, flags win over file values:
    figma-codegen --config config.json
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from . import config
from .generator import CodeGenerator
from .integrations.figma_client import FigmaClient, FigmaClientError
from .logging_config import get_cli_logger
from .models import SUPPORTED_DIALECTS, GenerationConfig
from .writer import write_files

logger = logging.getLogger(__name__)

# Values left in by copying the example config file
_PLACEHOLDERS = {"YOUR_FIGMA_ACCESS_TOKEN", "YOUR_FIGMA_FILE_KEY"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="figma-codegen",
        description="Generate component source code from a Figma design",
    )
    parser.add_argument("file_key", nargs="?", help="Figma file key")
    parser.add_argument("--node-id", help="Generate from this node instead of the whole file")
    parser.add_argument("--input", help="Local JSON design document (skips the Figma fetch)")
    parser.add_argument("--config", help="JSON config file ({'figma': {...}, 'output': {...}})")
    parser.add_argument(
        "--output-dir",
        help=f"Directory for generated files (default: {config.OUTPUT_DIR})",
    )
    parser.add_argument("--format", choices=SUPPORTED_DIALECTS, help="Output dialect (default: react)")
    parser.add_argument("--no-typescript", action="store_true", help="Emit JavaScript, no type declarations")
    parser.add_argument("--no-componentize", action="store_true", help="Generate one flat unit")
    parser.add_argument("--component-name", help="Name of the root component")
    parser.add_argument("--css-framework", help="Recorded in the generation config, not interpreted")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data


def _clean(value: Optional[str]) -> Optional[str]:
    if not value or value in _PLACEHOLDERS:
        return None
    return value


def build_generation_config(args: argparse.Namespace, file_config: Dict[str, Any]) -> GenerationConfig:
    """Merge config-file `output` settings with command-line flags."""
    output = file_config.get("output") or {}
    return GenerationConfig(
        output_dialect=args.format or output.get("format") or "react",
        typed=False if args.no_typescript else output.get("useTypeScript") is not False,
        componentize=False if args.no_componentize else output.get("componentize") is not False,
        css_framework=args.css_framework or output.get("cssFramework") or "none",
        component_name=args.component_name or output.get("componentName"),
    )


async def fetch_design(file_key: str, node_id: Optional[str], token: Optional[str]) -> Dict[str, Any]:
    async with FigmaClient(token=token) as client:
        return await client.fetch_document(file_key, node_id)


def load_design(args: argparse.Namespace, file_config: Dict[str, Any]) -> Dict[str, Any]:
    if args.input:
        with open(args.input, encoding="utf-8") as f:
            design = json.load(f)
        # Accept a raw node or a full /v1/files response
        if isinstance(design, dict) and isinstance(design.get("document"), dict):
            design = design["document"]
        logger.info(f"Loaded design from {args.input}")
        return design

    figma = file_config.get("figma") or {}
    file_key = args.file_key or _clean(figma.get("fileKey"))
    if not file_key:
        raise ValueError("A Figma file key or --input design file is required")
    node_id = args.node_id or figma.get("nodeId")
    token = _clean(figma.get("accessToken"))

    logger.info(f"Fetching design: file={file_key}, node={node_id}")
    return asyncio.run(fetch_design(file_key, node_id, token))


def run(args: argparse.Namespace) -> int:
    try:
        file_config = load_config_file(args.config)
        generation_config = build_generation_config(args, file_config)
        design = load_design(args, file_config)
        files = CodeGenerator(generation_config).generate(design)
        output_dir = (
            args.output_dir
            or (file_config.get("output") or {}).get("outputDir")
            or config.OUTPUT_DIR
        )
        written = write_files(files, output_dir)
    except (FigmaClientError, ValueError, OSError) as e:
        logger.error(f"Code generation failed: {e}")
        return 1

    logger.info(f"Generated {len(written)} files in {os.path.abspath(output_dir)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    get_cli_logger(verbose=args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
