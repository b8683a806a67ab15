"""Allow ``python -m duochess``."""

from duochess.app import main

main()
