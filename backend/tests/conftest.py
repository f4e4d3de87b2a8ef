# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Shared pytest fixtures for all tests
"""
import os
from unittest.mock import patch

import pytest

from icebergaws.utils.config_loader import config_loader
from icebergaws.utils.config_types import (
    AWS_GLUE_ACCESS_KEY,
    AWS_GLUE_REGION,
    AWS_GLUE_SECRET_KEY,
    AWS_S3_ACCESS_KEY,
    AWS_S3_REGION,
    AWS_S3_SECRET_KEY,
)


@pytest.fixture(autouse=True)
def aws_environment(tmp_path):
    """Isolate tests from the developer's AWS credentials, config files and IMDS"""
    env = {k: v for k, v in os.environ.items() if not k.startswith('AWS_')}
    env.update({
        'AWS_CONFIG_FILE': str(tmp_path / 'aws_config'),
        'AWS_SHARED_CREDENTIALS_FILE': str(tmp_path / 'aws_credentials'),
        'AWS_EC2_METADATA_DISABLED': 'true',
    })
    env.pop('CONFIG_PATH', None)
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture(autouse=True)
def reset_config_loader():
    """The loader is a module-level singleton; don't leak cached config between tests"""
    config_loader.clear_cache()
    yield
    config_loader.clear_cache()


@pytest.fixture
def static_key_properties():
    """Static key pair for both services"""
    return {
        AWS_S3_ACCESS_KEY: 'AKIAS3EXAMPLE',
        AWS_S3_SECRET_KEY: 's3-secret',
        AWS_S3_REGION: 'us-east-1',
        AWS_GLUE_ACCESS_KEY: 'AKIAGLUEEXAMPLE',
        AWS_GLUE_SECRET_KEY: 'glue-secret',
        AWS_GLUE_REGION: 'us-east-1',
    }
