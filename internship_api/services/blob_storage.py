"""
Scoped Upload Service - resume files in Azure Blob Storage.

PURPOSE:
Store an uploaded file and hand back a URL that grants read access to
that one blob for a limited time. The account key signs the grant but
never leaves the server.

FLOW:
1. Ensure the container exists (create-if-absent)
2. Upload the whole payload as "{epoch_millis}-{original_name}"
3. Sign a read-only SAS for exactly that blob, expiring after sas_expiry_seconds
4. Return blob_url + "?" + sas_token

NAMING RISK:
Two uploads with the same filename in the same millisecond get the same
blob name and the later one overwrites the earlier one.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Optional

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.storage.blob import BlobSasPermissions, generate_blob_sas
from azure.storage.blob.aio import BlobServiceClient

from internship_api.core.config import get_settings
from internship_api.core.errors import Misconfigured, StorageFailure

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_blob_name(original_name: str, issued_at: datetime) -> str:
    """Derive the storage name from the upload time and the client's filename."""
    millis = int(issued_at.timestamp() * 1000)
    return f"{millis}-{original_name}"


class ScopedUploadService:
    """
    Uploads payloads and issues time-limited read-only URLs for them.

    Args:
        connection_string: Azure Storage connection string (with AccountKey)
        container_name: destination container, created on demand
        expiry_seconds: lifetime of the issued SAS
        client_factory: builds the async BlobServiceClient (swapped in tests)
        clock: returns the current UTC time (swapped in tests)
    """

    def __init__(
        self,
        connection_string: Optional[str],
        container_name: str = "resumes",
        expiry_seconds: int = 3600,
        client_factory: Callable[[str], BlobServiceClient] = BlobServiceClient.from_connection_string,
        clock: Callable[[], datetime] = utc_now
    ):
        self.connection_string = connection_string
        self.container_name = container_name
        self.expiry_seconds = expiry_seconds
        self._client_factory = client_factory
        self._clock = clock

    async def upload(self, payload: bytes, original_name: str) -> str:
        """
        Store payload and return its signed read-only URL.

        Raises:
            Misconfigured: no connection string, or one that cannot sign
            StorageFailure: container creation or upload failed
        """
        if not self.connection_string:
            raise Misconfigured("Azure Storage connection string not configured")

        try:
            service_client = self._client_factory(self.connection_string)
        except ValueError as e:
            raise Misconfigured(f"Invalid Azure Storage connection string: {e}") from e

        account_key = getattr(service_client.credential, "account_key", None)
        if not account_key:
            await service_client.close()
            raise Misconfigured("Azure Storage connection string has no account key to sign with")

        issued_at = self._clock()
        blob_name = make_blob_name(original_name, issued_at)

        async with service_client:
            container_client = service_client.get_container_client(self.container_name)
            try:
                await self._ensure_container(container_client)
                blob_client = container_client.get_blob_client(blob_name)
                await blob_client.upload_blob(payload, overwrite=True)
            except AzureError as e:
                logger.error("Upload of %s failed: %s", blob_name, e)
                raise StorageFailure(str(e)) from e

        logger.info("Uploaded blob %s/%s (%d bytes)", self.container_name, blob_name, len(payload))

        sas_token = self.sign_read_access(
            account_name=service_client.account_name,
            account_key=account_key,
            blob_name=blob_name,
            issued_at=issued_at
        )
        return f"{blob_client.url}?{sas_token}"

    def sign_read_access(
        self,
        account_name: str,
        account_key: str,
        blob_name: str,
        issued_at: datetime
    ) -> str:
        """Build the SAS query string for one blob: read only, fixed lifetime."""
        return generate_blob_sas(
            account_name=account_name,
            container_name=self.container_name,
            blob_name=blob_name,
            account_key=account_key,
            permission=BlobSasPermissions(read=True),
            expiry=issued_at + timedelta(seconds=self.expiry_seconds)
        )

    async def _ensure_container(self, container_client) -> None:
        try:
            await container_client.create_container()
            logger.info("Created container %s", self.container_name)
        except ResourceExistsError:
            pass


@lru_cache()
def get_upload_service() -> ScopedUploadService:
    """Get upload service instance (singleton)."""
    settings = get_settings()
    return ScopedUploadService(
        connection_string=settings.azure_storage_connection_string,
        container_name=settings.resume_container,
        expiry_seconds=settings.sas_expiry_seconds
    )
