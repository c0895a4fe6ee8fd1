"""
Thin HTTP client for the DeSo node API.

Every operation checks its required parameters before touching the network,
maps keyword arguments to the node's wire field names and returns the parsed
response body unchanged. Transport failures from httpx propagate as-is.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Any, Dict, List, Optional

import httpx

from deso_api.api.transport import (
    close_shared_transport,
    get_shared_transport,
    shared_transport_settings,
)
from deso_api.config import DesoConfig, default_config
from deso_api.metrics import MetricsRecorder, default_metrics
from deso_api.validators import drop_absent, is_defined, is_present

logger = logging.getLogger(__name__)


class DesoApiError(Exception):
    """Base exception for errors raised by this package."""


class ValidationError(DesoApiError):
    """Raised before any request is sent when a required parameter is missing."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


def _normalize_url(url: str) -> str:
    return url.rstrip("/")


class DesoApiClient:
    """Async client for the DeSo node API surface."""

    def __init__(
        self,
        config: DesoConfig | None = None,
        *,
        base_url: Optional[str] = None,
        async_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[MetricsRecorder] = None,
    ) -> None:
        config = config or default_config
        if base_url:
            config = replace(config, base_url=base_url)
        self.config = config
        self.metrics = metrics or default_metrics
        self._client: Optional[httpx.AsyncClient] = async_client
        self._uses_shared = async_client is None
        self._warned_shared_mismatch = False

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _get_client(self) -> httpx.AsyncClient:
        if not self._uses_shared:
            assert self._client is not None
            return self._client
        client = get_shared_transport(self.config.base_url, self.config.timeout)
        settings = shared_transport_settings()
        if (
            not self._warned_shared_mismatch
            and settings is not None
            and settings != (_normalize_url(self.config.base_url), self.config.timeout)
        ):
            logger.warning(
                "Shared transport is bound to %s (timeout %ss); requests for %s (timeout %ss) use it",
                settings[0],
                settings[1],
                self.config.base_url,
                self.config.timeout,
            )
            self._warned_shared_mismatch = True
        return client

    async def aclose(self) -> None:
        if self._uses_shared:
            await close_shared_transport()

    def _require(self, endpoint: str, field: str, value: Any, *, boolean: bool = False) -> None:
        present = is_defined(value) if boolean else is_present(value)
        if present:
            return
        logger.debug("Rejected %s: %s is required", endpoint, field)
        self.metrics.incr_validation_error(endpoint)
        raise ValidationError(f"{field} is required", field=field)

    async def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        client = self._get_client()
        logger.debug("%s %s", method, path)
        self.metrics.incr_request()
        start = time.monotonic()
        try:
            if method == "GET":
                response = await client.get(path)
            else:
                response = await client.post(path, json=drop_absent(body or {}))
            result = self._process_response(response)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "DeSo request failed for path %s",
                path,
                extra={"endpoint": path, "error": type(exc).__name__},
            )
            self.metrics.record_endpoint(path, success=False)
            raise
        finally:
            self.metrics.record_duration(path, (time.monotonic() - start) * 1000)
        self.metrics.record_endpoint(path, success=True)
        return result

    def _process_response(self, response: Optional[httpx.Response]) -> Any:
        if response is None:
            return None
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    async def get_exchange_rate(self) -> Any:
        """Get the DeSo exchange rate, total nanos sold and the Bitcoin exchange rate."""
        return await self._request("GET", "/v0/get-exchange-rate")

    async def get_app_state(self) -> Any:
        """Get app state such as the profile creation cost and the diamond level map."""
        return await self._request("POST", "/v0/get-app-state", {})

    async def get_is_hodling_public_key(
        self,
        *,
        public_key: Optional[str] = None,
        is_hodling_public_key: Optional[str] = None,
    ) -> Any:
        """Check whether ``public_key`` holds the creator coin of ``is_hodling_public_key``."""
        path = "/v0/is-hodling-public-key"
        self._require(path, "public_key", public_key)
        self._require(path, "is_hodling_public_key", is_hodling_public_key)
        body = {
            "PublicKeyBase58Check": public_key,
            "IsHodlingPublicKeyBase58Check": is_hodling_public_key,
        }
        return await self._request("POST", path, body)

    async def get_single_profile(
        self,
        *,
        public_key: Optional[str] = None,
        username: Optional[str] = None,
    ) -> Any:
        """
        Fetch a single profile by public key or username.

        The public key wins when both are given; only one of the two fields is
        sent.
        """
        path = "/v0/get-single-profile"
        self._require(path, "public_key or username", public_key or username)
        body: Dict[str, Any]
        if public_key:
            body = {"PublicKeyBase58Check": public_key}
        else:
            body = {"username": username}
        return await self._request("POST", path, body)

    async def get_users_stateless(self, *, public_keys: Optional[List[str]] = None) -> Any:
        """Fetch user entries for a list of public keys."""
        path = "/v0/get-users-stateless"
        self._require(path, "public_keys", public_keys)
        body = {
            "PublicKeysBase58Check": public_keys,
            "SkipForLeaderboard": True,
        }
        return await self._request("POST", path, body)

    async def get_follows_stateless(
        self,
        *,
        public_key: Optional[str] = None,
        get_entries_following_username: Optional[bool] = None,
        num_to_fetch: Optional[int] = None,
    ) -> Any:
        """Fetch followers of, or accounts followed by, a public key."""
        path = "/v0/get-follows-stateless"
        self._require(path, "public_key", public_key)
        self._require(
            path, "get_entries_following_username", get_entries_following_username, boolean=True
        )
        self._require(path, "num_to_fetch", num_to_fetch)
        body = {
            "PublicKeyBase58Check": public_key,
            "GetEntriesFollowingUsername": get_entries_following_username,
            "NumToFetch": num_to_fetch,
        }
        return await self._request("POST", path, body)

    async def get_holders_for_public_key(
        self,
        *,
        num_to_fetch: Optional[int] = None,
        public_key: Optional[str] = None,
        username: Optional[str] = None,
        fetch_hodlings: Optional[bool] = None,
        last_public_key: Optional[str] = None,
        fetch_all: Optional[bool] = None,
    ) -> Any:
        """Fetch balance entries for the holders (or hodlings) of a creator."""
        path = "/v0/get-hodlers-for-public-key"
        self._require(path, "public_key or username", public_key or username)
        self._require(path, "num_to_fetch", num_to_fetch)
        body = {
            "Username": username,
            "FetchAll": fetch_all,
            "PublicKeyBase58Check": public_key,
            "NumToFetch": num_to_fetch,
            "LastPublicKeyBase58Check": last_public_key,
            "FetchHodlings": fetch_hodlings,
        }
        return await self._request("POST", path, body)

    async def get_notifications(
        self,
        *,
        public_key: Optional[str] = None,
        fetch_start_index: Optional[int] = None,
        num_to_fetch: Optional[int] = None,
    ) -> Any:
        """
        Fetch notifications for a public key.

        All parameters are required. Use ``fetch_start_index=-1`` to start from
        the most recent notification; ``0`` is rejected as missing.
        """
        path = "/v0/get-notifications"
        self._require(path, "public_key", public_key)
        self._require(path, "fetch_start_index", fetch_start_index)
        self._require(path, "num_to_fetch", num_to_fetch)
        body = {
            "PublicKeyBase58Check": public_key,
            "FetchStartIndex": fetch_start_index,
            "NumToFetch": num_to_fetch,
        }
        return await self._request("POST", path, body)

    async def get_transaction(self, *, txn_hash_hex: Optional[str] = None) -> Any:
        """Check whether a transaction is currently in the mempool."""
        path = "/v0/get-txn"
        self._require(path, "txn_hash_hex", txn_hash_hex)
        return await self._request("POST", path, {"TxnHashHex": txn_hash_hex})

    async def submit_transaction(self, *, transaction_hex: Optional[str] = None) -> Any:
        """Submit a signed transaction to the network."""
        path = "/v0/submit-transaction"
        self._require(path, "transaction_hex", transaction_hex)
        return await self._request("POST", path, {"TransactionHex": transaction_hex})

    async def authorize_derived_key(
        self,
        *,
        owner_public_key_base58_check: Optional[str] = None,
        derived_public_key_base58_check: Optional[str] = None,
        expiration_block: Optional[int] = None,
        access_signature: Optional[str] = None,
        delete_key: Optional[bool] = None,
        min_fee_rate_nanos_per_kb: Optional[int] = None,
        derived_key_signature: Optional[str] = None,
    ) -> Any:
        """Authorize or delete a derived key."""
        path = "/v0/authorize-derived-key"
        self._require(path, "owner_public_key_base58_check", owner_public_key_base58_check)
        self._require(path, "derived_public_key_base58_check", derived_public_key_base58_check)
        self._require(path, "expiration_block", expiration_block)
        self._require(path, "access_signature", access_signature)
        self._require(path, "delete_key", delete_key, boolean=True)
        self._require(path, "min_fee_rate_nanos_per_kb", min_fee_rate_nanos_per_kb)
        body = {
            "OwnerPublicKeyBase58Check": owner_public_key_base58_check,
            "DerivedPublicKeyBase58Check": derived_public_key_base58_check,
            "ExpirationBlock": expiration_block,
            "AccessSignature": access_signature,
            "DeleteKey": delete_key,
            "DerivedKeySignature": derived_key_signature,
            "MinFeeRateNanosPerKB": min_fee_rate_nanos_per_kb,
        }
        return await self._request("POST", path, body)

    async def append_extra_data(
        self,
        *,
        transaction_hex: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Append extra data to an unsigned transaction."""
        path = "/v0/append-extra-data"
        self._require(path, "transaction_hex", transaction_hex)
        self._require(path, "extra_data", extra_data)
        body = {
            "TransactionHex": transaction_hex,
            "ExtraData": extra_data,
        }
        return await self._request("POST", path, body)

    async def get_user_derived_keys(self, *, public_key_base58_check: Optional[str] = None) -> Any:
        """List every derived key authorized by a public key."""
        path = "/v0/get-user-derived-keys"
        self._require(path, "public_key_base58_check", public_key_base58_check)
        return await self._request("POST", path, {"PublicKeyBase58Check": public_key_base58_check})


default_client = DesoApiClient()
