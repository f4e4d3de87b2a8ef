# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Configuration types and validation for the AWS client factory

Property keys consumed by the factory, plus Pydantic models that turn the
flat string property map into typed per-service settings.
"""

from typing import Any, Dict, Literal, Mapping, Optional
from urllib.parse import urlsplit

from botocore.config import Config
from botocore.exceptions import InvalidRegionError
from botocore.utils import is_valid_endpoint_url, is_valid_ipv6_endpoint_url, validate_region_name
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigurationError


# Object storage (S3) properties
AWS_S3_USE_AWS_SDK_DEFAULT_BEHAVIOR = 'aws.s3.use_aws_sdk_default_behavior'
AWS_S3_USE_INSTANCE_PROFILE = 'aws.s3.use_instance_profile'
AWS_S3_ACCESS_KEY = 'aws.s3.access_key'
AWS_S3_SECRET_KEY = 'aws.s3.secret_key'
AWS_S3_IAM_ROLE_ARN = 'aws.s3.iam_role_arn'
AWS_S3_EXTERNAL_ID = 'aws.s3.external_id'
AWS_S3_REGION = 'aws.s3.region'
AWS_S3_ENDPOINT = 'aws.s3.endpoint'

# Metadata catalog (Glue) properties
AWS_GLUE_USE_AWS_SDK_DEFAULT_BEHAVIOR = 'aws.glue.use_aws_sdk_default_behavior'
AWS_GLUE_USE_INSTANCE_PROFILE = 'aws.glue.use_instance_profile'
AWS_GLUE_ACCESS_KEY = 'aws.glue.access_key'
AWS_GLUE_SECRET_KEY = 'aws.glue.secret_key'
AWS_GLUE_IAM_ROLE_ARN = 'aws.glue.iam_role_arn'
AWS_GLUE_EXTERNAL_ID = 'aws.glue.external_id'
AWS_GLUE_REGION = 'aws.glue.region'
AWS_GLUE_ENDPOINT = 'aws.glue.endpoint'

STORAGE_PREFIX = 'aws.s3.'
CATALOG_PREFIX = 'aws.glue.'

# Field name on ServiceCredentialSettings -> property key suffix
CREDENTIAL_PROPERTY_SUFFIXES = {
    'use_aws_sdk_default_behavior': 'use_aws_sdk_default_behavior',
    'use_instance_profile': 'use_instance_profile',
    'access_key': 'access_key',
    'secret_key': 'secret_key',
    'iam_role_arn': 'iam_role_arn',
    'external_id': 'external_id',
    'region': 'region',
    'endpoint': 'endpoint',
}

# HTTP client properties (same names as Iceberg's AwsProperties)
HTTP_CLIENT_TYPE = 'http-client.type'
HTTP_CLIENT_TYPE_APACHE = 'apache'
HTTP_CLIENT_TYPE_URLCONNECTION = 'urlconnection'
HTTP_CLIENT_TYPE_DEFAULT = HTTP_CLIENT_TYPE_APACHE

HTTP_CLIENT_URLCONNECTION_CONNECTION_TIMEOUT_MS = 'http-client.urlconnection.connection-timeout-ms'
HTTP_CLIENT_URLCONNECTION_SOCKET_TIMEOUT_MS = 'http-client.urlconnection.socket-timeout-ms'
HTTP_CLIENT_APACHE_CONNECTION_TIMEOUT_MS = 'http-client.apache.connection-timeout-ms'
HTTP_CLIENT_APACHE_SOCKET_TIMEOUT_MS = 'http-client.apache.socket-timeout-ms'
HTTP_CLIENT_APACHE_MAX_CONNECTIONS = 'http-client.apache.max-connections'
HTTP_CLIENT_APACHE_TCP_KEEP_ALIVE_ENABLED = 'http-client.apache.tcp-keep-alive-enabled'

ALL_CREDENTIAL_PROPERTIES = [
    prefix + suffix
    for prefix in (STORAGE_PREFIX, CATALOG_PREFIX)
    for suffix in CREDENTIAL_PROPERTY_SUFFIXES.values()
]

# Environment variables that override file-based properties
# e.g. 'aws.s3.region' <- AWS_S3_REGION
ENV_VAR_MAPPINGS = {
    key: key.replace('.', '_').upper()
    for key in ALL_CREDENTIAL_PROPERTIES
}


def parse_boolean(value: Any) -> bool:
    """Only a case-insensitive 'true' is true; anything else, including None, is false"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).lower() == 'true'


def _format_validation_error(error: ValidationError) -> str:
    return '; '.join(
        f"{'.'.join(str(loc) for loc in item['loc']) or 'settings'}: {item['msg']}"
        for item in error.errors()
    )


class ServiceCredentialSettings(BaseModel):
    """Credential strategy, region and endpoint for one AWS service"""
    model_config = ConfigDict(frozen=True)

    use_aws_sdk_default_behavior: bool = False
    use_instance_profile: bool = False
    access_key: str = ''
    secret_key: str = Field(default='', repr=False)
    iam_role_arn: str = ''
    external_id: str = Field(default='', repr=False)
    region: str = ''
    endpoint: str = ''

    @field_validator('use_aws_sdk_default_behavior', 'use_instance_profile', mode='before')
    @classmethod
    def parse_flag(cls, v):
        return parse_boolean(v)

    @model_validator(mode='after')
    def validate_overrides(self):
        """
        Check region and endpoint overrides

        Skipped under default SDK behavior, where both overrides are ignored.
        """
        if self.use_aws_sdk_default_behavior:
            return self

        if self.region:
            try:
                validate_region_name(self.region)
            except InvalidRegionError as e:
                raise ValueError(f"Invalid region identifier: {self.region!r}") from e

        if self.endpoint:
            scheme = urlsplit(self.endpoint).scheme
            valid_host = is_valid_endpoint_url(self.endpoint) or is_valid_ipv6_endpoint_url(self.endpoint)
            if scheme not in ('http', 'https') or not valid_host:
                raise ValueError(f"Malformed endpoint URI: {self.endpoint!r}")

        return self

    @property
    def has_key_pair(self) -> bool:
        return bool(self.access_key) and bool(self.secret_key)

    @classmethod
    def from_properties(cls, properties: Mapping[str, str], prefix: str) -> 'ServiceCredentialSettings':
        """
        Build settings from the flat property map

        Args:
            properties: Flat string property map
            prefix: Service key prefix ('aws.s3.' or 'aws.glue.')

        Raises:
            ConfigurationError: If the region or endpoint override is malformed
        """
        values = {}
        for field_name, suffix in CREDENTIAL_PROPERTY_SUFFIXES.items():
            value = properties.get(prefix + suffix)
            if value is not None:
                values[field_name] = value

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid '{prefix}*' configuration: {_format_validation_error(e)}"
            ) from e


class HttpClientSettings(BaseModel):
    """HTTP transport settings shared by all clients built by the factory"""
    model_config = ConfigDict(frozen=True)

    client_type: Literal['apache', 'urlconnection'] = HTTP_CLIENT_TYPE_DEFAULT
    connection_timeout_ms: Optional[int] = Field(default=None, ge=0)
    socket_timeout_ms: Optional[int] = Field(default=None, ge=0)
    max_connections: Optional[int] = Field(default=None, ge=1)
    tcp_keep_alive: Optional[bool] = None

    @field_validator('tcp_keep_alive', mode='before')
    @classmethod
    def parse_keep_alive(cls, v):
        if v is None:
            return None
        return parse_boolean(v)

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'HttpClientSettings':
        """
        Read 'http-client.*' properties

        Timeouts are read under the selected client type's prefix; pool size
        and keep-alive only exist for the apache client.
        """
        client_type = str(properties.get(HTTP_CLIENT_TYPE, HTTP_CLIENT_TYPE_DEFAULT)).strip().lower()
        if client_type not in (HTTP_CLIENT_TYPE_APACHE, HTTP_CLIENT_TYPE_URLCONNECTION):
            raise ConfigurationError(
                f"Unrecognized HTTP client type: {client_type!r}. "
                f"Available: {[HTTP_CLIENT_TYPE_APACHE, HTTP_CLIENT_TYPE_URLCONNECTION]}"
            )

        if client_type == HTTP_CLIENT_TYPE_APACHE:
            keys = {
                'connection_timeout_ms': HTTP_CLIENT_APACHE_CONNECTION_TIMEOUT_MS,
                'socket_timeout_ms': HTTP_CLIENT_APACHE_SOCKET_TIMEOUT_MS,
                'max_connections': HTTP_CLIENT_APACHE_MAX_CONNECTIONS,
                'tcp_keep_alive': HTTP_CLIENT_APACHE_TCP_KEEP_ALIVE_ENABLED,
            }
        else:
            keys = {
                'connection_timeout_ms': HTTP_CLIENT_URLCONNECTION_CONNECTION_TIMEOUT_MS,
                'socket_timeout_ms': HTTP_CLIENT_URLCONNECTION_SOCKET_TIMEOUT_MS,
            }

        values: Dict[str, Any] = {'client_type': client_type}
        for field_name, key in keys.items():
            value = properties.get(key)
            if value is not None and str(value).strip() != '':
                values[field_name] = value

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid 'http-client.*' configuration: {_format_validation_error(e)}"
            ) from e

    def to_botocore_config(self) -> Config:
        """Translate to a botocore Config; unset values keep botocore's defaults"""
        kwargs: Dict[str, Any] = {}
        if self.connection_timeout_ms is not None:
            kwargs['connect_timeout'] = self.connection_timeout_ms / 1000
        if self.socket_timeout_ms is not None:
            kwargs['read_timeout'] = self.socket_timeout_ms / 1000
        if self.max_connections is not None:
            kwargs['max_pool_connections'] = self.max_connections
        if self.tcp_keep_alive is not None:
            kwargs['tcp_keepalive'] = self.tcp_keep_alive
        return Config(**kwargs)


class ClientFactoryConfig(BaseModel):
    """Complete client factory configuration"""
    model_config = ConfigDict(frozen=True)

    storage: ServiceCredentialSettings = Field(default_factory=ServiceCredentialSettings)
    catalog: ServiceCredentialSettings = Field(default_factory=ServiceCredentialSettings)
    http_client: HttpClientSettings = Field(default_factory=HttpClientSettings)

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'ClientFactoryConfig':
        """Ingest the flat property map into independent storage and catalog settings"""
        return cls(
            storage=ServiceCredentialSettings.from_properties(properties, STORAGE_PREFIX),
            catalog=ServiceCredentialSettings.from_properties(properties, CATALOG_PREFIX),
            http_client=HttpClientSettings.from_properties(properties),
        )
