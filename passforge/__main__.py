"""
CLI interface for Passforge.
"""

import logging
import sys
import threading
import time
from typing import List

import click

from . import __version__
from .exceptions import PasswordGenerationError, RandomSourceError
from .utils.password_generator import DEFAULT_LENGTH, GenerationRequest, PasswordGenerator

CLIPBOARD_CLEAR_SECONDS = 60


def copy_to_clipboard(password: str) -> None:
    """
    Copy password to the clipboard and clear it after a delay.

    The command does not exit until the clear has run.
    """
    try:
        import pyperclip
        pyperclip.copy(password)
        click.echo("🔐 Generated password copied to clipboard.")

        def clear_clipboard() -> None:
            time.sleep(CLIPBOARD_CLEAR_SECONDS)
            try:
                # Only clear if it's still our password
                if pyperclip.paste() == password:
                    pyperclip.copy("")
            except Exception:
                pass

        # Non-daemon so the process stays alive until the clipboard is cleared
        clear_thread = threading.Thread(target=clear_clipboard, daemon=False)
        clear_thread.start()
        click.echo(f"Clipboard will be cleared in {CLIPBOARD_CLEAR_SECONDS} seconds.")

    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
    except Exception as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)


@click.command()
@click.version_option(version=__version__, prog_name="passforge")
@click.option("--length", "-l", default=DEFAULT_LENGTH, type=click.IntRange(min=1),
              help=f"Password length (minimum 8, default: {DEFAULT_LENGTH})")
@click.option("--digits/--no-digits", default=True, help="Include digits")
@click.option("--symbols/--no-symbols", default=True, help="Include symbols")
@click.option("--upper/--no-upper", default=True, help="Include uppercase letters")
@click.option("--lower/--no-lower", default=True, help="Include lowercase letters")
@click.option("--exclude-similar/--include-similar", default=True,
              help="Exclude similar characters (i, l, 1, L, o, 0, O)")
@click.option("--exclude-ambiguous/--include-ambiguous", default=True,
              help="Exclude ambiguous characters ({ } [ ] ( ) / \\ ' \" ` ~ , ; : . < >)")
@click.option("--count", "-c", default=1, type=click.IntRange(1, 100),
              help="Number of passwords to generate")
@click.option("--copy", is_flag=True, help="Copy the last password to the clipboard and wait to clear it")
@click.option("--show-charset", is_flag=True, help="Describe the character set in use")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(length: int, digits: bool, symbols: bool, upper: bool, lower: bool,
        exclude_similar: bool, exclude_ambiguous: bool, count: int, copy: bool,
        show_charset: bool, verbose: bool) -> None:
    """Passforge - generate secure random passwords."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    request = GenerationRequest(
        length=length,
        digits=digits,
        symbols=symbols,
        upper=upper,
        lower=lower,
        exclude_similar=exclude_similar,
        exclude_ambiguous=exclude_ambiguous,
    )

    try:
        generator = PasswordGenerator(request)
        passwords: List[str] = [generator.generate() for _ in range(count)]
    except PasswordGenerationError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)
    except RandomSourceError as e:
        click.echo(f"Fatal: {e}", err=True)
        sys.exit(2)

    if show_charset:
        click.echo(f"Character set: {generator.get_charset_info()}")

    for password in passwords:
        click.echo(f"Generated password: {password}")

    if copy:
        copy_to_clipboard(passwords[-1])


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
