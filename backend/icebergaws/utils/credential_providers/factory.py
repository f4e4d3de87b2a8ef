# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Credential provider factory

Creates the appropriate credential provider for a service's settings.
"""
import logging

from ..config_types import ServiceCredentialSettings
from ..errors import MissingCredentialsError
from .assume_role_provider import AssumeRoleCredentialProvider
from .base import CredentialProvider
from .default_provider import DefaultCredentialProvider
from .instance_profile_provider import InstanceProfileCredentialProvider
from .static_provider import StaticCredentialProvider

logger = logging.getLogger(__name__)


class CredentialProviderFactory:
    """Factory for creating credential provider instances"""

    @staticmethod
    def resolve_base_provider(use_instance_profile: bool, access_key: str, secret_key: str) -> CredentialProvider:
        """
        Pick the provider that authenticates directly against AWS

        Instance profile wins over a key pair when both are configured.

        Raises:
            MissingCredentialsError: If neither strategy is configured
        """
        if use_instance_profile:
            return InstanceProfileCredentialProvider()
        if access_key and secret_key:
            return StaticCredentialProvider(access_key, secret_key)
        raise MissingCredentialsError(
            "No credentials configured: enable the instance profile or set both "
            "access key and secret key, or use the AWS SDK default behavior"
        )

    @classmethod
    def create(cls, settings: ServiceCredentialSettings, service: str = 'aws') -> CredentialProvider:
        """
        Create a fresh provider for one service

        Args:
            settings: The service's credential settings
            service: Label used in log and error messages

        Returns:
            CredentialProvider instance, never shared between calls

        Raises:
            MissingCredentialsError: If no credential strategy is configured
        """
        if settings.use_aws_sdk_default_behavior:
            logger.debug(f"{service}: using AWS SDK default credential chain")
            return DefaultCredentialProvider()

        try:
            provider = cls.resolve_base_provider(
                settings.use_instance_profile,
                settings.access_key,
                settings.secret_key
            )
        except MissingCredentialsError as e:
            logger.error(f"{service}: {e}")
            raise MissingCredentialsError(f"{service}: {e}") from e

        if settings.iam_role_arn:
            provider = AssumeRoleCredentialProvider(
                base_provider=provider,
                role_arn=settings.iam_role_arn,
                external_id=settings.external_id,
                region_name=settings.region or None
            )

        logger.debug(f"{service}: resolved {provider.provider_name} credential provider")
        return provider
