"""
Contract Deployment Wrapper
Runs scripts/deploy_drain.py
"""

import os
import subprocess
import sys

if __name__ == "__main__":
    print("=" * 70, file=sys.stderr)
    print("Drain Contract Deployment", file=sys.stderr)
    print("=" * 70, file=sys.stderr)

    # Run deployment script
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_drain"],
        cwd=os.path.dirname(os.path.abspath(__file__))
    )

    sys.exit(0 if result.returncode == 0 else 1)
