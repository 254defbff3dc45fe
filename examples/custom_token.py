#!/usr/bin/env python3
"""
Prepare a claim for a different token-bound account.
"""
import os

from tokenbound_claimer import ClaimConfig, ClaimerError, Settings, run_claim

def main():
    """
    Demonstrate library usage of the claimer.

    This example shows how to:
    1. Read settings from the environment
    2. Override the owning token in the claim configuration
    3. Inspect the prepared execution parameters
    """
    token_id = int(os.environ.get("TOKEN_ID", "539"))

    try:
        settings = Settings.from_env()
        config = ClaimConfig(token_id=token_id)
        result = run_claim(settings, config)
    except ClaimerError as e:
        print(f"Error preparing claim: {e}")
        return

    print(f"Token-bound account: {result.account}")
    print(f"Claim amount: {result.claim_data.amount}")
    print(f"Send to: {result.execution.to} on chain {result.execution.chain_id}")
    print(f"Calldata: {result.execution.data}")

if __name__ == "__main__":
    main()
