# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the catalog configuration loader
"""

import json
import os
from unittest.mock import patch

import pytest
import yaml

from icebergaws.utils.client_factory import AwsClientFactory
from icebergaws.utils.config_loader import ConfigLoader
from icebergaws.utils.config_types import AWS_GLUE_REGION, AWS_S3_REGION, AWS_S3_USE_INSTANCE_PROFILE


@pytest.fixture
def catalog_config():
    return {
        'catalog': {
            'properties': {
                'aws.s3.use_instance_profile': True,
                'aws.s3.region': 'us-west-2',
                'aws.glue.access_key': 'AK',
                'aws.glue.secret_key': 'SK',
                'aws.glue.region': 'eu-west-1',
                'http-client.apache.max-connections': 20,
                'aws.glue.endpoint': None,
            }
        }
    }


@pytest.fixture
def json_config_path(tmp_path, catalog_config):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps(catalog_config))
    return path


class TestConfigLoader:
    """Test the ConfigLoader class"""

    def setup_method(self):
        self.loader = ConfigLoader()

    def test_load_json_config(self, json_config_path):
        with patch.dict(os.environ, {'CONFIG_PATH': str(json_config_path)}):
            config = self.loader.load_config()

        assert config['catalog']['properties']['aws.s3.region'] == 'us-west-2'

    @pytest.mark.parametrize('suffix', ['.yaml', '.yml'])
    def test_load_yaml_config(self, tmp_path, catalog_config, suffix):
        path = tmp_path / f'config{suffix}'
        path.write_text(yaml.safe_dump(catalog_config))

        with patch.dict(os.environ, {'CONFIG_PATH': str(path)}):
            config = self.loader.load_config()

        assert config['catalog']['properties']['aws.glue.region'] == 'eu-west-1'

    def test_missing_file_raises(self, tmp_path):
        with patch.dict(os.environ, {'CONFIG_PATH': str(tmp_path / 'missing.json')}):
            with pytest.raises(RuntimeError, match='Configuration not found or invalid'):
                self.loader.load_config()

    def test_missing_catalog_section_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'lambda': {}}))

        with patch.dict(os.environ, {'CONFIG_PATH': str(path)}):
            with pytest.raises(RuntimeError, match='missing catalog section'):
                self.loader.load_config()

    def test_config_is_cached(self, json_config_path):
        with patch.dict(os.environ, {'CONFIG_PATH': str(json_config_path)}):
            first = self.loader.load_config()
            json_config_path.write_text(json.dumps({'catalog': {'properties': {}}}))
            second = self.loader.load_config()

        assert first is second

    def test_clear_cache(self, json_config_path):
        with patch.dict(os.environ, {'CONFIG_PATH': str(json_config_path)}):
            self.loader.load_config()
            json_config_path.write_text(json.dumps({'catalog': {'properties': {}}}))
            self.loader.clear_cache()
            config = self.loader.load_config()

        assert config['catalog']['properties'] == {}

    def test_load_properties_renders_strings(self, json_config_path):
        with patch.dict(os.environ, {'CONFIG_PATH': str(json_config_path)}):
            properties = self.loader.load_properties()

        assert properties[AWS_S3_USE_INSTANCE_PROFILE] == 'true'
        assert properties['http-client.apache.max-connections'] == '20'
        assert 'aws.glue.endpoint' not in properties

    def test_environment_overrides(self, json_config_path):
        with patch.dict(os.environ, {
            'CONFIG_PATH': str(json_config_path),
            'AWS_S3_REGION': 'ap-northeast-1',
        }):
            properties = self.loader.load_properties()

        assert properties[AWS_S3_REGION] == 'ap-northeast-1'
        assert properties[AWS_GLUE_REGION] == 'eu-west-1'

    def test_properties_must_be_mapping(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'catalog': {'properties': ['aws.s3.region']}}))

        with patch.dict(os.environ, {'CONFIG_PATH': str(path)}):
            with pytest.raises(RuntimeError, match='must be a mapping'):
                self.loader.load_properties()

    def test_get_client_factory_singleton(self, json_config_path):
        with patch.dict(os.environ, {'CONFIG_PATH': str(json_config_path)}):
            factory = self.loader.get_client_factory()

            assert isinstance(factory, AwsClientFactory)
            assert factory is self.loader.get_client_factory()
            assert factory.storage_settings.use_instance_profile is True
            assert factory.catalog_settings.region == 'eu-west-1'
            assert factory.config.http_client.max_connections == 20
