"""
SinsoToken Deployment Script
Deploys SinsoToken with the fixed owner placeholder and initial supply
"""

import sys

from blockchain.deployment import main

CONTRACT_NAME = "SinsoToken"


if __name__ == "__main__":
    sys.exit(main(CONTRACT_NAME))
