# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the configuration API
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from icebergaws.main import app, handler
from icebergaws.utils.client_factory import AwsClientFactory
from icebergaws.utils.config_types import (
    AWS_GLUE_ACCESS_KEY,
    AWS_GLUE_IAM_ROLE_ARN,
    AWS_GLUE_REGION,
    AWS_GLUE_SECRET_KEY,
    AWS_S3_REGION,
    AWS_S3_USE_INSTANCE_PROFILE,
)


class TestConfigAPI:
    """Test config API endpoints"""

    @pytest.fixture
    def client(self):
        """Create test client"""
        return TestClient(app)

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_credentials(self, client):
        factory = AwsClientFactory({
            AWS_S3_USE_INSTANCE_PROFILE: 'true',
            AWS_S3_REGION: 'us-west-2',
            AWS_GLUE_ACCESS_KEY: 'AKIAGLUE1234',
            AWS_GLUE_SECRET_KEY: 'glue-secret',
            AWS_GLUE_IAM_ROLE_ARN: 'arn:aws:iam::1:role/r',
            AWS_GLUE_REGION: 'us-east-1',
        })

        with patch('icebergaws.routes.config.config_loader.get_client_factory', return_value=factory):
            response = client.get('/config/credentials')

        assert response.status_code == 200
        body = response.json()
        assert body['storage']['credentials'] == {'provider': 'instance_profile'}
        assert body['storage']['region'] == 'us-west-2'
        assert body['catalog']['credentials']['provider'] == 'assume_role'
        assert body['catalog']['credentials']['base']['access_key'] == '****1234'
        assert 'glue-secret' not in response.text

    def test_credentials_config_failure(self, client):
        with patch(
            'icebergaws.routes.config.config_loader.get_client_factory',
            side_effect=RuntimeError('Configuration not found or invalid')
        ):
            response = client.get('/config/credentials')

        assert response.status_code == 500
        assert response.json()['detail'] == 'Failed to load client factory configuration'

    def test_lambda_handler(self):
        assert handler is not None
