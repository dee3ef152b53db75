"""
Interactive CLI adapter for the brand generator.

Architectural role:
- Exposes the session state machine in a terminal.
- Delegates all generation to `brandgen.core.session.BrandSession`.

Request lifecycle (per input line):
1. Read stdin.
2. Handle local commands (`exit`/`quit`, `/keys`, `/regenerate`, `/flagship`,
   `/restart`, `/help`).
3. Treat any other text as a business description and submit it.
4. Print the brand (or flagship product) or the surfaced error.

Input validation behavior:
- Empty input is ignored.
- Missing keys trigger the `/keys` prompt instead of a network call.

Error handling strategy:
- `BrandGenError` messages are printed; the loop continues.
- EOF and keyboard interrupts terminate the loop without traceback output.
"""

import asyncio
import getpass
import logging
import sys

from brandgen.core.errors import BrandGenError, MissingCredentials
from brandgen.core.session import LOADING_MESSAGES, BrandSession, View
from brandgen.credentials import CredentialKind, build_default_store


logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Describe your business idea to get a brand.\n"
    "Commands:\n"
    " /keys        set or clear API keys\n"
    " /regenerate  new brand for the same idea\n"
    " /flagship    show (or redo) the flagship product\n"
    " /restart     start over\n"
    " exit         quit\n"
)


# =========================================================
# UTF-8 SAFE OUTPUT
# =========================================================

def _configure_stdout():
    if hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
        except (OSError, ValueError):
            pass


# =========================================================
# RENDERING
# =========================================================

def render_brand(session: BrandSession) -> str:
    brand = session.brand
    return (
        f"\n  {brand.name}\n"
        f'  "{brand.tagline}"\n'
        f"  Logo: {brand.logo_url}\n"
    )


def render_product(session: BrandSession) -> str:
    product = session.product
    return (
        "\nFlagship product:\n"
        f"  {product.pitch}\n"
        f"  Image: {product.image_url}\n"
    )


def prompt_for_keys(session: BrandSession, read_secret=getpass.getpass) -> None:
    """Ask for both keys; blank input clears the stored key."""
    status = session.credential_status()
    print("\nEnter API keys (leave blank to clear).")
    text_key = read_secret(
        f"Anthropic key [{'set' if status[CredentialKind.TEXT.value] else 'missing'}]: "
    )
    image_key = read_secret(
        f"OpenAI key [{'set' if status[CredentialKind.IMAGE.value] else 'missing'}]: "
    )
    session.save_credentials(text_key=text_key, image_key=image_key)
    print("Keys saved.\n")


# =========================================================
# COMMAND DISPATCH
# =========================================================

def handle_line(session: BrandSession, line: str, read_secret=getpass.getpass) -> bool:
    """Process one input line. Returns `False` when the loop should stop."""
    command = line.strip()
    if not command:
        return True

    lowered = command.lower()

    if lowered in ("exit", "quit"):
        print("Shutting down.")
        return False

    if lowered == "/help":
        print(HELP_TEXT)
        return True

    if lowered == "/keys":
        prompt_for_keys(session, read_secret)
        return True

    if lowered == "/restart":
        session.start_over()
        print("Starting over.\n")
        return True

    try:
        if lowered == "/regenerate":
            print(f"\n{LOADING_MESSAGES[0]}")
            asyncio.run(session.regenerate())
            print(render_brand(session))
        elif lowered == "/flagship":
            print("\nCreating your product...")
            asyncio.run(session.request_flagship())
            print(render_product(session))
        elif command.startswith("/"):
            print(f"Unknown command: {command}\n")
        else:
            if session.view is View.RESULTS:
                session.start_over()
            print(f"\n{LOADING_MESSAGES[0]}")
            asyncio.run(session.submit(command))
            print(render_brand(session))

    except MissingCredentials:
        print("API keys are needed first.")
        prompt_for_keys(session, read_secret)

    except BrandGenError as err:
        print(f"\n{session.last_error or err}\n")

    return True


# =========================================================
# MAIN
# =========================================================

def main(session=None):
    """Run the interactive loop until `exit`, EOF, or Ctrl+C."""
    _configure_stdout()
    session = session or BrandSession(build_default_store())

    print("Brand generator started. (Type '/help' for commands, 'exit' to quit)")
    print("-" * 60)

    while True:
        try:
            line = input("Business idea: ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not handle_line(session, line):
            break

        print("-" * 60)


if __name__ == "__main__":
    main()
