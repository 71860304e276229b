"""Pytest fixtures for sitecore_webapi tests."""
import base64
import io
import json
from unittest.mock import Mock

import pytest
import requests
from Crypto.PublicKey import RSA

from sitecore_webapi import SitecoreCredentials

HOST = 'cms.example.com'


def build_response(status_code=200, body=b'', reason='OK',
                   content_type='application/json; charset=utf-8',
                   url='http://cms.example.com/-/item/v1'):
    """Builds a real ``requests.Response`` backed by an in-memory body."""
    if isinstance(body, str):
        body = body.encode('utf-8')
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.raw = io.BytesIO(body)
    response.headers['Content-Type'] = content_type
    response.encoding = 'utf-8'
    response.url = url
    return response


@pytest.fixture
def make_response():
    """Factory for in-memory HTTP responses."""
    return build_response


@pytest.fixture
def mock_session():
    """Session double that prepares requests for real and never hits the network."""
    session = Mock(spec=requests.Session)
    session.prepare_request.side_effect = lambda request: request.prepare()
    return session


@pytest.fixture
def credentials():
    """Plaintext credentials."""
    return SitecoreCredentials('sitecore\\admin', 'b')


@pytest.fixture
def encrypted_credentials():
    """Credentials asking for encrypted headers."""
    return SitecoreCredentials('sitecore\\admin', 'b', encrypt_headers=True)


@pytest.fixture(scope='session')
def rsa_key_pair():
    """Generates a 2048-bit RSA key pair for testing."""
    return RSA.generate(2048)


@pytest.fixture
def public_key_xml(rsa_key_pair):
    """``getpublickey`` body in the server's XML form."""
    modulus = base64.b64encode(rsa_key_pair.n.to_bytes(256, 'big')).decode()
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<RSAKeyValue><Modulus>{modulus}</Modulus><Exponent>AQAB</Exponent></RSAKeyValue>'
    )


@pytest.fixture
def items_body():
    """Item endpoint JSON body with one item."""
    return json.dumps({
        'statusCode': 200,
        'result': {
            'totalCount': 1,
            'resultCount': 1,
            'items': [{
                'Database': 'web',
                'DisplayName': 'Home',
                'HasChildren': True,
                'ID': '{110D559F-DEA5-42EA-9C1C-8A5DF7E70EF9}',
                'Language': 'en',
                'LongID': '/{11111111-1111-1111-1111-111111111111}/{110D559F-DEA5-42EA-9C1C-8A5DF7E70EF9}',
                'Path': '/sitecore/content/Home',
                'Template': 'Sample/Sample Item',
                'Version': 1,
                'Fields': {
                    '{75577384-3C97-45DA-A847-81B00500E250}': {
                        'Name': 'Title',
                        'Value': 'Sitecore'
                    }
                }
            }]
        }
    })
