# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Base credential provider interface

Provides abstract base class for the credential strategies the client
factory can resolve (default chain, instance profile, static keys,
assumed role).
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

import boto3
import botocore.credentials
import botocore.session
from botocore.credentials import Credentials


class CredentialProvider(ABC):
    """Base class for credential providers"""

    METHOD = 'custom'

    @abstractmethod
    def load(self) -> Optional[Credentials]:
        """
        Resolve to usable botocore credentials

        Must not perform network I/O for refreshable strategies; the first
        fetch happens when a client signs its first request.
        """
        pass

    @abstractmethod
    def get_config(self) -> Dict:
        """
        Get provider description

        Returns public configuration that can be shared with clients.
        Should NOT include secrets (secret keys, external IDs, tokens)
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider name (default, instance_profile, static, assume_role)"""
        pass

    def create_session(self, region_name: Optional[str] = None) -> boto3.session.Session:
        """
        Create a boto3 session whose only credential source is this provider

        A fresh botocore session is built on every call so nothing is shared
        between clients.
        """
        botocore_session = botocore.session.get_session()
        botocore_session.register_component(
            'credential_provider',
            botocore.credentials.CredentialResolver(providers=[_ResolverAdapter(self)])
        )
        return boto3.session.Session(botocore_session=botocore_session, region_name=region_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_config()!r})"


class _ResolverAdapter(botocore.credentials.CredentialProvider):
    """Plugs a CredentialProvider into botocore's credential resolver"""

    def __init__(self, provider: CredentialProvider):
        super().__init__()
        self.METHOD = provider.METHOD
        self._provider = provider

    def load(self):
        return self._provider.load()
