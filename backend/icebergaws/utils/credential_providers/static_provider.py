# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Static access key / secret key credential provider
"""
from typing import Dict

from botocore.credentials import Credentials

from .base import CredentialProvider


class StaticCredentialProvider(CredentialProvider):
    """Fixed access key pair from configuration"""

    METHOD = 'explicit'

    def __init__(self, access_key: str, secret_key: str):
        self.access_key = access_key
        self._secret_key = secret_key

    def load(self) -> Credentials:
        return Credentials(self.access_key, self._secret_key, method=self.METHOD)

    def get_config(self) -> Dict:
        """Only the last four characters of the access key are exposed"""
        return {
            'provider': self.provider_name,
            'access_key': f"****{self.access_key[-4:]}",
        }

    @property
    def provider_name(self) -> str:
        return 'static'
