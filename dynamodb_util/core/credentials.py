"""
Credential Resolution

Turns a DynamoDBConfig into one of two credential variants:

- CognitoIdentityCredentials: short-lived tokens vended by a Cognito identity
  pool. The identity endpoint is contacted lazily, the first time botocore
  signs a request, and again whenever the token nears expiry.
- StaticCredentials: a long-lived access key pair.

Resolution order is fixed: a non-empty identity pool id always wins, even
when a key pair is configured as well.
"""

import logging
from typing import Any, Dict, Optional, Union

import boto3
import botocore.session
from botocore import UNSIGNED
from botocore.config import Config
from botocore.credentials import CredentialProvider, DeferredRefreshableCredentials

from ..config import DynamoDBConfig
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class StaticCredentials:
    """Long-lived access key pair."""

    method = "static"

    def __init__(self, access_key_id: str, secret_access_key: str):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key

    def create_session(self, region_name: str) -> boto3.Session:
        """Build a boto3 session signing with the key pair."""
        return boto3.Session(
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            region_name=region_name
        )

    def __repr__(self) -> str:
        return f"StaticCredentials(access_key_id={self.access_key_id!r})"


class CognitoIdentityProvider(CredentialProvider):
    """Credential provider chain entry that defers to a Cognito identity pool."""

    METHOD = "cognito-identity"
    CANONICAL_NAME = "CognitoIdentity"

    def __init__(self, refresh_using):
        super().__init__()
        self._refresh_using = refresh_using

    def load(self):
        return DeferredRefreshableCredentials(
            refresh_using=self._refresh_using,
            method=self.METHOD
        )


class CognitoIdentityCredentials:
    """
    Federated credentials supplied by a Cognito identity pool.

    Nothing is fetched at construction time. The session returned by
    create_session() resolves credentials through CognitoIdentityProvider,
    placed first in its provider chain; the deferred credentials it loads
    have a refresh callback that performs GetId (once) and GetCredentialsForIdentity
    (on every refresh) against the unauthenticated Cognito Identity API.
    """

    method = "cognito-identity"

    def __init__(self, region_name: str, identity_pool_id: str):
        self.region_name = region_name
        self.identity_pool_id = identity_pool_id
        self._identity_id: Optional[str] = None
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the Cognito Identity client."""
        if self._client is None:
            self._client = boto3.client(
                'cognito-identity',
                region_name=self.region_name,
                config=Config(signature_version=UNSIGNED)
            )
        return self._client

    @property
    def identity_id(self) -> str:
        """Identity id for this pool, obtained on first use and then reused."""
        if self._identity_id is None:
            response = self.client.get_id(IdentityPoolId=self.identity_pool_id)
            self._identity_id = response['IdentityId']
            logger.info(f"Obtained Cognito identity {self._identity_id} from pool {self.identity_pool_id}")
        return self._identity_id

    def fetch(self) -> Dict[str, Any]:
        """Fetch a fresh token set in the shape botocore refreshes expect."""
        response = self.client.get_credentials_for_identity(IdentityId=self.identity_id)
        credentials = response['Credentials']
        expiration = credentials['Expiration']
        logger.debug(f"Refreshed Cognito credentials for {self.identity_id}, expiring {expiration}")
        return {
            'access_key': credentials['AccessKeyId'],
            'secret_key': credentials['SecretKey'],
            'token': credentials['SessionToken'],
            'expiry_time': expiration.isoformat() if hasattr(expiration, 'isoformat') else expiration,
        }

    def create_session(self, region_name: str) -> boto3.Session:
        """Build a boto3 session whose credentials refresh through Cognito."""
        botocore_session = botocore.session.get_session()
        # Ahead of env so ambient AWS_ACCESS_KEY_ID/AWS_SECRET_ACCESS_KEY never win
        botocore_session.get_component('credential_provider').insert_before(
            'env', CognitoIdentityProvider(self.fetch)
        )
        return boto3.Session(botocore_session=botocore_session, region_name=region_name)

    def __repr__(self) -> str:
        return f"CognitoIdentityCredentials(region_name={self.region_name!r}, identity_pool_id={self.identity_pool_id!r})"


Credentials = Union[StaticCredentials, CognitoIdentityCredentials]


def resolve_credentials(config: DynamoDBConfig) -> Credentials:
    """
    Select the credential variant for a configuration.

    Args:
        config: DynamoDB configuration

    Returns:
        CognitoIdentityCredentials when an identity pool id is configured,
        otherwise StaticCredentials built from the access key pair

    Raises:
        ConfigurationError: If neither an identity pool id nor a complete
            access key pair is available
    """
    if config.identity_pool_id:
        logger.debug(f"Using Cognito identity pool {config.identity_pool_id} in {config.region_name}")
        return CognitoIdentityCredentials(config.region_name, config.identity_pool_id)

    access_key_id = config.aws_access_key_id
    secret_access_key = config.aws_secret_access_key
    if access_key_id and secret_access_key:
        logger.debug("Using static access key credentials")
        return StaticCredentials(access_key_id, secret_access_key)

    missing = [
        name for name, value in (
            ("aws_access_key_id", access_key_id),
            ("aws_secret_access_key", secret_access_key),
        ) if not value
    ]
    raise ConfigurationError("Insufficient credentials provided", missing=["identity_pool_id"] + missing)
