# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Credential provider abstraction

Provides the credential strategies (SDK default chain, instance profile,
static keys, assumed role) used to build AWS clients, and the factory that
picks one from a service's settings.
"""
from .base import CredentialProvider
from .factory import CredentialProviderFactory
from .default_provider import DefaultCredentialProvider
from .instance_profile_provider import InstanceProfileCredentialProvider
from .static_provider import StaticCredentialProvider
from .assume_role_provider import AssumeRoleCredentialProvider

__all__ = [
    'CredentialProvider',
    'CredentialProviderFactory',
    'DefaultCredentialProvider',
    'InstanceProfileCredentialProvider',
    'StaticCredentialProvider',
    'AssumeRoleCredentialProvider',
]
