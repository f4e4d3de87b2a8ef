# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
EC2 instance profile credential provider

Credentials come from the instance metadata service. Nothing is fetched
until a client actually needs to sign a request; botocore refreshes the
credentials before they expire.
"""
import logging
from typing import Dict, Optional

from botocore.credentials import DeferredRefreshableCredentials
from botocore.exceptions import CredentialRetrievalError
from botocore.utils import InstanceMetadataFetcher

from .base import CredentialProvider

logger = logging.getLogger(__name__)


class InstanceProfileCredentialProvider(CredentialProvider):
    """Instance metadata service (IMDS) credentials"""

    METHOD = 'iam-role'

    def __init__(self, fetcher: Optional[InstanceMetadataFetcher] = None):
        self._fetcher = fetcher or InstanceMetadataFetcher()

    def load(self) -> DeferredRefreshableCredentials:
        return DeferredRefreshableCredentials(
            refresh_using=self._retrieve_credentials,
            method=self.METHOD
        )

    def _retrieve_credentials(self) -> Dict:
        metadata = self._fetcher.retrieve_iam_role_credentials()
        if not metadata:
            raise CredentialRetrievalError(
                provider=self.METHOD,
                error_msg='instance metadata service returned no role credentials'
            )
        logger.info(f"Found credentials from IAM Role: {metadata.get('role_name')}")
        return metadata

    def get_config(self) -> Dict:
        return {'provider': self.provider_name}

    @property
    def provider_name(self) -> str:
        return 'instance_profile'
