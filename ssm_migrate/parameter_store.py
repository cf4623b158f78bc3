"""
Parameter Store client

A narrow adapter over the boto3 SSM client. The migration only needs four
operations, so anything with the same methods (an in-memory fake in tests,
for example) can stand in for it.
"""

from dataclasses import dataclass
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import ConfigLoadError


PARAMETER_TYPES = ("String", "SecureString", "StringList")


class ParameterStoreError(Exception):
    """The store could not be reached or returned an unexpected error."""


class ParameterNotFoundError(ParameterStoreError):
    """No parameter exists under the requested name."""


class ParameterStoreRejectedError(ParameterStoreError):
    """The store refused a write (already exists, access denied, bad type...)."""


@dataclass
class Parameter:
    """A parameter as returned by GetParameter."""

    name: str
    value: str
    type: str
    description: str = ""
    version: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type not in PARAMETER_TYPES:
            raise ValueError(
                f"Invalid parameter type {self.type!r}; "
                f"expected one of {PARAMETER_TYPES}"
            )

    @property
    def is_secure(self) -> bool:
        return self.type == "SecureString"


@dataclass
class ParameterSummary:
    """Parameter metadata as returned by DescribeParameters (no value)."""

    name: str
    type: str
    description: str = ""


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def _summary_from_metadata(metadata: dict) -> ParameterSummary:
    return ParameterSummary(
        name=metadata["Name"],
        type=metadata.get("Type", "String"),
        description=metadata.get("Description") or "",
    )


class SSMParameterStore:
    """Parameter store backed by AWS Systems Manager."""

    def __init__(self, client):
        """
        Initialize the store.

        Args:
            client: A boto3 SSM client
        """
        self.client = client

    @classmethod
    def from_profile(cls, profile: str, region: Optional[str] = None) -> "SSMParameterStore":
        """
        Build a store from a named AWS profile.

        Args:
            profile: Shared config/credentials profile name
            region: Optional region override

        Returns:
            SSMParameterStore using a client from that profile

        Raises:
            ConfigLoadError: If the profile or its credentials can't be resolved
        """
        try:
            session = boto3.Session(profile_name=profile)
            if session.get_credentials() is None:
                raise ConfigLoadError(
                    message=f"unable to load SDK config, no credentials for profile '{profile}'"
                )
            client = session.client("ssm", region_name=region)
        except BotoCoreError as e:
            raise ConfigLoadError(
                cause=e, message=f"unable to load SDK config, {e}"
            ) from e
        return cls(client)

    def list_all(self) -> List[ParameterSummary]:
        """
        List metadata for every parameter visible to the client.

        Returns:
            List of ParameterSummary across all pages
        """
        summaries = []
        try:
            paginator = self.client.get_paginator("describe_parameters")
            for page in paginator.paginate():
                summaries.extend(
                    _summary_from_metadata(metadata) for metadata in page.get("Parameters", [])
                )
        except (ClientError, BotoCoreError) as e:
            raise ParameterStoreError(str(e)) from e
        return summaries

    def get_by_name(self, name: str, decrypt: bool = True) -> Parameter:
        """
        Fetch a single parameter, decrypting SecureString values by default.

        Raises:
            ParameterNotFoundError: If the parameter doesn't exist
            ParameterStoreError: On any other failure
        """
        try:
            response = self.client.get_parameter(Name=name, WithDecryption=decrypt)
        except ClientError as e:
            if _error_code(e) == "ParameterNotFound":
                raise ParameterNotFoundError(str(e)) from e
            raise ParameterStoreError(str(e)) from e
        except BotoCoreError as e:
            raise ParameterStoreError(str(e)) from e

        param = response["Parameter"]
        return Parameter(
            name=param["Name"],
            value=param["Value"],
            type=param["Type"],
            version=param.get("Version"),
        )

    def describe_by_name_filter(self, name: str) -> List[ParameterSummary]:
        """
        Describe parameters whose name is exactly ``name``.

        Returns:
            List with zero or one ParameterSummary
        """
        try:
            response = self.client.describe_parameters(
                ParameterFilters=[
                    {"Key": "Name", "Option": "Equals", "Values": [name]},
                ]
            )
        except (ClientError, BotoCoreError) as e:
            raise ParameterStoreError(str(e)) from e
        return [_summary_from_metadata(metadata) for metadata in response.get("Parameters", [])]

    def put(self, name: str, value: str, type: str, description: str = "",
            overwrite: bool = False) -> int:
        """
        Write a parameter.

        Args:
            name: Parameter name
            value: Parameter value
            type: String, SecureString or StringList
            description: Description; an empty string clears any existing one
            overwrite: Replace an existing parameter instead of failing

        Returns:
            The version number assigned by the store

        Raises:
            ParameterStoreRejectedError: If the service refused the write
            ParameterStoreError: On transport failure
        """
        # Always sent so an overwrite replaces a stale description
        try:
            response = self.client.put_parameter(
                Name=name,
                Value=value,
                Type=type,
                Description=description,
                Overwrite=overwrite,
            )
        except ClientError as e:
            raise ParameterStoreRejectedError(str(e)) from e
        except BotoCoreError as e:
            raise ParameterStoreError(str(e)) from e
        return response.get("Version")
