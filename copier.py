"""
Valorant Account Settings Copier

Main entry point: prompts for two Riot logins, then copies the first
account's player settings onto the second.
"""

import sys
from getpass import getpass

from auth import AccountSession
from config import CopierConfig
from errors import CopierError
from preferences_api import transfer_settings


def read_line(prompt: str, secret: bool = False) -> str:
    """Prompt for one line with trailing CR/LF removed"""
    try:
        value = getpass(prompt) if secret else input(prompt)
    except EOFError:
        return ""
    return value.rstrip("\r\n")


def run(config: CopierConfig) -> bool:
    """Prompt, authenticate both accounts and transfer; True on success"""
    print("Valorant Account Settings Copier")
    print("--------------------------------")

    from_user = read_line("From account login name: ")
    from_password = read_line("From account login password: ", secret=True)

    to_user = read_line("To account login name: ")
    to_password = read_line("To account login password: ", secret=True)

    with AccountSession("from", config) as source, AccountSession("to", config) as destination:
        try:
            source.authenticate(from_user, from_password)
            destination.authenticate(to_user, to_password)
            result = transfer_settings(source, destination)
        except CopierError as e:
            print(e)
            return False

    if result.success:
        print("Account settings transferred successfully")
    else:
        print("Failed to transfer settings")
    return result.success


def main() -> int:
    try:
        config = CopierConfig.from_env()
    except ValueError as e:
        print(e)
        success = False
    else:
        success = run(config)

    try:
        input("Press 'Enter' to close...")
    except EOFError:
        pass

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
