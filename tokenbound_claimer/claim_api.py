"""
Client for the claim data API.
"""
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .config import DEFAULT_CLAIM_API_URL
from .exceptions import ClaimDataHTTPError, ClaimDataParseError, ClaimDataTransportError
from .models import ClaimData
from .utils import validate_url


class ClaimApiClient:
    """
    Fetches Merkle claim entries for an address.

    Each lookup is a single GET; failures are not retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_CLAIM_API_URL,
        timeout: Optional[float] = 30,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the claim API client

        Args:
            base_url: Claim data endpoint, queried with ``?address=``
            timeout: Timeout for HTTP requests in seconds
            session: Optional requests session to reuse
            logger: Optional logger instance
        """
        self.base_url = validate_url("base_url", base_url)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def fetch_claim_data(self, address: str) -> ClaimData:
        """
        Fetch the claim entry for an address

        Args:
            address: Account the claim belongs to

        Returns:
            Parsed claim data

        Raises:
            ClaimDataHTTPError: If the API answers with a non-2xx status
            ClaimDataParseError: If the body is not valid claim data
            ClaimDataTransportError: If the request cannot be completed
        """
        self.logger.debug(f"Requesting claim data for {address} from {self.base_url}")
        try:
            response = self.session.get(
                self.base_url,
                params={"address": address},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"Claim API request failed: {e}")
            raise ClaimDataTransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            self.logger.error(f"Claim API returned status {response.status_code}")
            raise ClaimDataHTTPError(response.status_code, response.text)

        # Check content type before attempting JSON parsing
        content_type = response.headers.get('Content-Type', '')
        if 'application/json' not in content_type:
            self.logger.warning(f"Unexpected Content-Type: {content_type} (expected application/json)")

        try:
            body = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON response from claim API: {e}")
            raise ClaimDataParseError(f"Invalid JSON response: {e}") from e

        if not isinstance(body, dict):
            raise ClaimDataParseError(f"Expected a JSON object, got {type(body).__name__}")

        try:
            claim_data = ClaimData.model_validate(body)
        except ValidationError as e:
            fields = ", ".join(".".join(str(loc) for loc in err["loc"]) for err in e.errors())
            raise ClaimDataParseError(f"Invalid claim data ({fields}): {e.error_count()} error(s)") from e

        self.logger.debug(f"Claim API response: index={claim_data.index} proof_len={len(claim_data.proof)}")
        return claim_data
