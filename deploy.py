"""
Token Deployment Wrapper
Runs scripts/deploy_sinso_token.py
"""

import subprocess
import sys

DEPLOY_SCRIPT = "scripts/deploy_sinso_token.py"


def run() -> int:
    print("=" * 70)
    print("SinsoToken Deployment")
    print("=" * 70)
    print()

    # Run deployment script
    result = subprocess.run(
        [sys.executable, DEPLOY_SCRIPT],
        cwd="."
    )

    return result.returncode


if __name__ == "__main__":
    sys.exit(run())
