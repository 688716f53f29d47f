"""Package entry point for ``python -m bls_decoder``.

WHY: Users inspect a save with ``python -m bls_decoder House.bls``.

HOW: Delegates to the CLI's main() function.
"""

from bls_decoder.cli import main

if __name__ == "__main__":
    main()
