# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Default SDK credential provider

Defers entirely to boto3's standard discovery order (environment, shared
config files, container and instance metadata, ...).
"""
from typing import Dict, Optional

import boto3
import botocore.session
from botocore.credentials import Credentials

from .base import CredentialProvider


class DefaultCredentialProvider(CredentialProvider):
    """boto3 default credential chain"""

    METHOD = 'default-chain'

    def load(self) -> Optional[Credentials]:
        return botocore.session.get_session().get_credentials()

    def get_config(self) -> Dict:
        return {'provider': self.provider_name}

    def create_session(self, region_name: Optional[str] = None) -> boto3.session.Session:
        """Plain boto3 session, the SDK resolves everything itself"""
        return boto3.session.Session(region_name=region_name)

    @property
    def provider_name(self) -> str:
        return 'default'
