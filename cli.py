#!/usr/bin/env python3
"""
CLI tool for local text analysis and enhancement.

Runs the UNO analyzer and enhancer over a file (or stdin) without needing
to start the web app.
"""

import os
import sys
import logging
from typing import Any, Dict, Optional

import click
from dotenv import load_dotenv

from src.uno.services import TextToolService
from src.uno.services.text_service import DEFAULT_MAX_TEXT_LENGTH
from src.uno.utils.errors import APIError

# Load environment variables
load_dotenv()


def get_text_service() -> TextToolService:
    max_length = int(os.getenv('MAX_TEXT_LENGTH', str(DEFAULT_MAX_TEXT_LENGTH)))
    return TextToolService(max_text_length=max_length)


def write_output(content: str, output: Optional[str]) -> None:
    """Write content to a file, or to stdout when no path is given."""
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(content)
        click.echo(f"✓ Wrote {len(content)} characters to {output}", err=True)
    else:
        click.echo(content)


def run_tool(tool_name: str, arguments: Dict[str, Any], output: Optional[str]) -> None:
    """Call a tool and write its result, exiting with status 1 on failure."""
    try:
        result = get_text_service().call_tool(tool_name, arguments)
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    try:
        write_output(result, output)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)


def build_arguments(text: str, target: Optional[int]) -> Dict[str, Any]:
    arguments: Dict[str, Any] = {"text": text}
    if target is not None:
        arguments["expansionTarget"] = target
    return arguments


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """UNO (Unified Narrative Operator) text tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@cli.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'))
@click.option('--output', '-o', type=click.Path(), help='Output file path (default: stdout)')
def analyze(input_file, output):
    """Analyze INPUT_FILE ('-' for stdin) and print the Markdown report."""
    run_tool("analyze_text", {"text": input_file.read()}, output)


@cli.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'))
@click.option('--target', '-t', type=int, default=None,
              help='Target expansion percentage, 100-500 (default: 200)')
@click.option('--output', '-o', type=click.Path(), help='Output file path (default: stdout)')
def enhance(input_file, target, output):
    """Enhance INPUT_FILE ('-' for stdin) with every technique."""
    run_tool("enhance_text", build_arguments(input_file.read(), target), output)


@cli.command('custom-enhance')
@click.argument('input_file', type=click.File('r', encoding='utf-8'))
@click.option('--target', '-t', type=int, default=None,
              help='Target expansion percentage, 100-500 (default: 150)')
@click.option('--golden-shadow/--no-golden-shadow', default=True,
              help='Develop briefly mentioned characters and plot elements')
@click.option('--environmental/--no-environmental', default=True,
              help='Add sensory and setting detail')
@click.option('--action-scene/--no-action-scene', default=True,
              help='Intensify action paragraphs')
@click.option('--prose-smoother/--no-prose-smoother', default=True,
              help='Add transitions between paragraphs')
@click.option('--repetition-elimination/--no-repetition-elimination', default=True,
              help='Replace overused words with synonyms')
@click.option('--output', '-o', type=click.Path(), help='Output file path (default: stdout)')
def custom_enhance(input_file, target, golden_shadow, environmental, action_scene,
                   prose_smoother, repetition_elimination, output):
    """Enhance INPUT_FILE ('-' for stdin) with selected techniques."""
    arguments = build_arguments(input_file.read(), target)
    arguments.update({
        "enableGoldenShadow": golden_shadow,
        "enableEnvironmental": environmental,
        "enableActionScene": action_scene,
        "enableProseSmoother": prose_smoother,
        "enableRepetitionElimination": repetition_elimination,
    })
    run_tool("custom_enhance_text", arguments, output)


@cli.command()
def tools():
    """List the available tools."""
    for tool in get_text_service().list_tools():
        click.echo(f"{tool['name']}: {tool['description']}")


if __name__ == '__main__':
    cli()
