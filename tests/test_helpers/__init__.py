from .client_creator import (
    create_test_client,
    create_test_api,
    TEST_RPC_URL,
    TEST_CLAIM_API_URL,
    TEST_PRIV_KEY,
    TEST_TOKEN_CONTRACT,
    TEST_TOKEN_ID,
    TEST_CLAIM_CONTRACT,
    TEST_PROOF,
    TEST_CLAIM_BODY,
)
