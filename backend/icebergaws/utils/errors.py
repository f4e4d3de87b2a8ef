# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Exception classes for the AWS client factory
"""


class ClientFactoryError(Exception):
    """Base client factory exception"""
    pass

class ConfigurationError(ClientFactoryError):
    """Invalid or incomplete client configuration"""
    pass

class MissingCredentialsError(ConfigurationError):
    """No usable credential strategy configured for a service"""
    pass
