"""meli-accounts 실행 스크립트

    $ python main.py -u seller123
"""

import os
import sys

_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from cli.app import cli  # noqa: E402


def main():
    """meli-accounts 진입점 (cli.app:cli 위임)"""
    cli(prog_name="meli-accounts")


if __name__ == "__main__":
    main()
