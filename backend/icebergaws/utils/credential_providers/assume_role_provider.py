# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
STS AssumeRole credential provider

Wraps a base provider (instance profile or static keys) and exchanges its
credentials for temporary role credentials. The AssumeRole call is made on
first use, not when the provider or client is built, and botocore refreshes
the session before it expires.
"""
import logging
import uuid
from typing import Callable, Dict, Optional

import botocore.session
from botocore.credentials import AssumeRoleCredentialFetcher, DeferredRefreshableCredentials

from .base import CredentialProvider

logger = logging.getLogger(__name__)


class AssumeRoleCredentialProvider(CredentialProvider):
    """Role assumption layered over a base credential provider"""

    METHOD = 'assume-role'

    def __init__(
        self,
        base_provider: CredentialProvider,
        role_arn: str,
        external_id: str = '',
        session_name: Optional[str] = None,
        region_name: Optional[str] = None,
        sts_client_creator: Optional[Callable] = None
    ):
        """
        Args:
            base_provider: Provider whose credentials sign the AssumeRole call
            role_arn: ARN of the role to assume
            external_id: Optional external ID; omitted from the request when empty
            session_name: Role session name, a random UUID when not given
            region_name: Region for the STS client (SDK default when None)
            sts_client_creator: Callable with the signature of
                ``botocore.session.Session.create_client``
        """
        self.base_provider = base_provider
        self.role_arn = role_arn
        self.external_id = external_id or None
        self.session_name = session_name or str(uuid.uuid4())
        self.region_name = region_name
        self._sts_client_creator = sts_client_creator or self._create_sts_client

    @property
    def assume_role_request(self) -> Dict[str, str]:
        """AssumeRole parameters sent to STS"""
        request = {
            'RoleArn': self.role_arn,
            'RoleSessionName': self.session_name,
        }
        if self.external_id:
            request['ExternalId'] = self.external_id
        return request

    def load(self) -> DeferredRefreshableCredentials:
        extra_args = {k: v for k, v in self.assume_role_request.items() if k != 'RoleArn'}
        fetcher = AssumeRoleCredentialFetcher(
            client_creator=self._sts_client_creator,
            source_credentials=self.base_provider.load(),
            role_arn=self.role_arn,
            extra_args=extra_args
        )
        logger.debug(f"Deferred AssumeRole for {self.role_arn} (session {self.session_name})")
        return DeferredRefreshableCredentials(
            refresh_using=fetcher.fetch_credentials,
            method=self.METHOD
        )

    def _create_sts_client(self, service_name: str, **kwargs):
        return botocore.session.get_session().create_client(
            service_name,
            region_name=self.region_name,
            **kwargs
        )

    def get_config(self) -> Dict:
        return {
            'provider': self.provider_name,
            'role_arn': self.role_arn,
            'external_id_set': self.external_id is not None,
            'base': self.base_provider.get_config(),
        }

    @property
    def provider_name(self) -> str:
        return 'assume_role'
