"""Check that the registration SMS still matches the approved DLT template."""

import sys

from eventreg.sms.templates import (
    REGISTRATION_TEMPLATE,
    matches_template,
    registration_message,
)


def main(reg_no: str = "RBG-12345") -> int:
    message = registration_message(reg_no)

    print("Generated Message:")
    print(message)
    print("\nApproved Template:")
    print(REGISTRATION_TEMPLATE)

    ok = matches_template(REGISTRATION_TEMPLATE, message)
    print(f"\nTemplate match: {'OK' if ok else 'MISMATCH'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
