# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
AWS client factory for the Iceberg Glue catalog
Builds S3 (storage) and Glue (catalog) clients, each with its own credential
strategy, region and endpoint, from a flat property map
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .config_types import ClientFactoryConfig, ServiceCredentialSettings
from .credential_providers import CredentialProvider, CredentialProviderFactory
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

STORAGE_SERVICE = 's3'
CATALOG_SERVICE = 'glue'
KEY_MANAGEMENT_SERVICE = 'kms'
KEY_VALUE_STORE_SERVICE = 'dynamodb'

SUPPORTED_CLIENTS = frozenset({STORAGE_SERVICE, CATALOG_SERVICE})
UNSUPPORTED_CLIENTS = frozenset({KEY_MANAGEMENT_SERVICE, KEY_VALUE_STORE_SERVICE})


class AwsClientFactory:
    """Client factory with independent storage and catalog credentials"""

    def __init__(self, properties: Optional[Mapping[str, str]] = None):
        self.config: Optional[ClientFactoryConfig] = None
        if properties is not None:
            self.initialize(properties)

    def initialize(self, properties: Mapping[str, str]) -> None:
        """
        Ingest the property map

        Must complete before any client is built; afterwards the settings are
        read-only and clients may be built from any thread.

        Raises:
            ConfigurationError: If the map is missing or a region, endpoint or
                HTTP client setting is malformed
        """
        if properties is None:
            raise ConfigurationError("Client factory properties are required")

        self.config = ClientFactoryConfig.from_properties(dict(properties))
        logger.info(
            f"AWS client factory initialized "
            f"(storage: {self._strategy_name(self.config.storage)}, "
            f"catalog: {self._strategy_name(self.config.catalog)})"
        )

    @property
    def storage_settings(self) -> ServiceCredentialSettings:
        return self._require_config().storage

    @property
    def catalog_settings(self) -> ServiceCredentialSettings:
        return self._require_config().catalog

    def storage_credential_provider(self) -> CredentialProvider:
        """Resolve a fresh credential provider for the storage client"""
        return CredentialProviderFactory.create(self.storage_settings, service=STORAGE_SERVICE)

    def catalog_credential_provider(self) -> CredentialProvider:
        """Resolve a fresh credential provider for the catalog client"""
        return CredentialProviderFactory.create(self.catalog_settings, service=CATALOG_SERVICE)

    def storage_client(self):
        """Build an S3 client"""
        return self._build_client(STORAGE_SERVICE, self.storage_settings)

    def catalog_client(self):
        """Build a Glue client"""
        return self._build_client(CATALOG_SERVICE, self.catalog_settings)

    def key_management_client(self) -> None:
        """KMS clients are not provided by this factory"""
        return None

    def key_value_store_client(self) -> None:
        """DynamoDB clients are not provided by this factory"""
        return None

    @staticmethod
    def supports(service_name: str) -> bool:
        """Whether this factory builds clients for the given service"""
        return service_name in SUPPORTED_CLIENTS

    def describe(self) -> Dict[str, Any]:
        """
        Describe the credential strategy per service

        Returns public configuration only; per-service configuration errors
        are reported in place instead of raised.
        """
        return {
            'storage': self._describe_service(STORAGE_SERVICE, self.storage_settings),
            'catalog': self._describe_service(CATALOG_SERVICE, self.catalog_settings),
        }

    def _describe_service(self, service_name: str, settings: ServiceCredentialSettings) -> Dict[str, Any]:
        try:
            provider = CredentialProviderFactory.create(settings, service=service_name)
        except ConfigurationError as e:
            return {'service': service_name, 'error': str(e)}

        if settings.use_aws_sdk_default_behavior:
            return {'service': service_name, 'credentials': provider.get_config()}

        return {
            'service': service_name,
            'credentials': provider.get_config(),
            'region': settings.region or None,
            'endpoint': settings.endpoint or None,
        }

    def _build_client(self, service_name: str, settings: ServiceCredentialSettings):
        provider = CredentialProviderFactory.create(settings, service=service_name)

        if settings.use_aws_sdk_default_behavior:
            # Region, endpoint and HTTP settings are left to the SDK as well
            return provider.create_session().client(service_name)

        session = provider.create_session(region_name=settings.region or None)
        client_kwargs = {'config': self._require_config().http_client.to_botocore_config()}
        if settings.endpoint:
            client_kwargs['endpoint_url'] = settings.endpoint

        client = session.client(service_name, **client_kwargs)
        logger.debug(
            f"Built {service_name} client: provider={provider.provider_name}, "
            f"region={client.meta.region_name}, endpoint={client.meta.endpoint_url}"
        )
        return client

    def _require_config(self) -> ClientFactoryConfig:
        if self.config is None:
            raise ConfigurationError("AwsClientFactory.initialize() must be called before building clients")
        return self.config

    @staticmethod
    def _strategy_name(settings: ServiceCredentialSettings) -> str:
        if settings.use_aws_sdk_default_behavior:
            return 'default'
        strategy = 'instance_profile' if settings.use_instance_profile else (
            'static' if settings.has_key_pair else 'unconfigured'
        )
        if settings.iam_role_arn:
            strategy = f"assume_role({strategy})"
        return strategy


# Factory function for easy instantiation
def create_client_factory(properties: Mapping[str, str]) -> AwsClientFactory:
    """Factory function to create an initialized AwsClientFactory"""
    return AwsClientFactory(properties)
