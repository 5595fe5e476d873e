"""
TestToken Deployment Script
Deploys TestToken with the same arguments as SinsoToken
"""

import sys

from blockchain.deployment import main

CONTRACT_NAME = "TestToken"


if __name__ == "__main__":
    sys.exit(main(CONTRACT_NAME))
