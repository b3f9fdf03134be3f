#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Form Rendering Script
Usage: python3 render_form.py <schema.json> [options]

Options:
  -o, --output PATH       Output PDF path (default: <output_dir>/<title>.pdf)
  --page-size SIZE        Override page size: letter, legal, A4, A5
  --toc-markdown          Also print the Table of Contents as Markdown
  --log-level LEVEL       DEBUG, INFO, WARNING (default: from settings)

Examples:
  # Render with settings from .env
  python3 render_form.py intake.json

  # A4 output to a chosen path, showing the TOC
  python3 render_form.py report.json -o out/report.pdf --page-size A4 --toc-markdown
"""

import argparse
import json
import sys
from pathlib import Path

from config.logging_config import setup_logger
from config.settings import settings
from formflow.contracts import ContractError, DocumentSchema
from formflow.formatting import LayoutError, resolve_toc_config, toc_to_markdown
from formflow.layout import FontError, LayoutAgent


def render_form(
    schema_path: str,
    output: str = None,
    page_size: str = None,
    toc_markdown: bool = False,
) -> Path:
    """Render a JSON form schema to PDF

    Args:
        schema_path: Path to the JSON schema
        output: Output PDF path (optional)
        page_size: Page size override (optional)
        toc_markdown: Print the TOC entries as Markdown after rendering

    Returns:
        Path to the written PDF
    """
    raw = json.loads(Path(schema_path).read_text(encoding="utf-8"))
    if page_size:
        raw["pageSize"] = page_size

    schema = DocumentSchema.from_dict(raw)
    agent = LayoutAgent(settings)
    result = agent.generate_pdf(schema)

    path = Path(output) if output else agent.default_output_path(schema)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(result.pdf_bytes)

    print(f"✅ {path} ({result.page_count} pages, {result.toc_page_count} TOC)")

    if toc_markdown and result.toc_entries:
        config = resolve_toc_config(schema.table_of_contents)
        print()
        print(toc_to_markdown(result.toc_entries, config.title))

    return path


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Render a flow-layout form schema to PDF',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('schema', help='JSON form schema')
    parser.add_argument('-o', '--output', help='Output PDF path')
    parser.add_argument('--page-size', choices=['letter', 'legal', 'A4', 'A5'],
                        help='Override the schema/settings page size')
    parser.add_argument('--toc-markdown', action='store_true',
                        help='Print the Table of Contents as Markdown')
    parser.add_argument('--log-level', default=settings.log_level,
                        help='Log level (default: from settings)')

    args = parser.parse_args(argv)
    setup_logger(level=args.log_level)

    try:
        render_form(args.schema, args.output, args.page_size, args.toc_markdown)
    except (ContractError, LayoutError, FontError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Cannot read schema: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
