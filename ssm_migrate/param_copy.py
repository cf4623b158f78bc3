"""
Parameter Copy

Copies parameters from the old naming hierarchy to the new one, one pair at a
time: read the source value, read its description, write it under the new
name with the same type.

The first failure aborts the run; remaining pairs are not attempted.
"""

from typing import Dict, Optional

from .common import format_parameter
from .errors import (
    DescriptionFetchError,
    DescriptionNotFound,
    DestinationWriteError,
    SourceFetchError,
    SourceNotFound,
)
from .name_mapper import generate_name_map
from .parameter_store import Parameter, ParameterNotFoundError, ParameterStoreError


class ParamCopy:
    """Main class for parameter copy operations."""

    def __init__(self, store, config: Dict, environment: str):
        """
        Initialize the ParamCopy utility.

        Args:
            store: Parameter store exposing get_by_name, describe_by_name_filter and put
            config: Validated migration configuration (see config_schema)
            environment: Environment label whose parameters are migrated
        """
        self.store = store
        self.config = config
        self.environment = environment

    @property
    def overwrite(self) -> bool:
        return bool(self.config.get('overwrite', False))

    def get_name_map(self) -> Dict[str, str]:
        """Build the old name -> new name mapping for this environment."""
        return generate_name_map(
            self.environment,
            self.config['variables'],
            self.config['namespace'],
            self.config['subsystem'],
        )

    def get_parameter_details(self, name: str) -> Parameter:
        """
        Fetch the source parameter with its value decrypted.

        Raises:
            SourceNotFound: If the parameter doesn't exist
            SourceFetchError: On any other store error
        """
        print(f"Getting parameter details for: {name}")
        try:
            return self.store.get_by_name(name, decrypt=True)
        except ParameterNotFoundError as e:
            raise SourceNotFound(name, e) from e
        except ParameterStoreError as e:
            raise SourceFetchError(name, e) from e

    def get_parameter_description(self, name: str) -> str:
        """
        Fetch the description of a parameter from its metadata.

        Raises:
            DescriptionNotFound: If no metadata matches the name
            DescriptionFetchError: On store error
        """
        try:
            matches = self.store.describe_by_name_filter(name)
        except ParameterStoreError as e:
            raise DescriptionFetchError(name, e) from e
        if not matches:
            raise DescriptionNotFound(name)
        return matches[0].description or ""

    def put_parameter(self, name: str, description: str, source: Parameter) -> None:
        """
        Write ``source``'s value under ``name`` keeping its type.

        Raises:
            DestinationWriteError: If the store rejects the write or can't be reached
        """
        try:
            self.store.put(
                name,
                source.value,
                source.type,
                description,
                overwrite=self.overwrite,
            )
        except ParameterStoreError as e:
            raise DestinationWriteError(name, e) from e

    def copy_parameter(self, source_name: str, dest_name: str) -> Parameter:
        """
        Copy a single parameter.

        Args:
            source_name: Name in the old hierarchy
            dest_name: Name in the new hierarchy

        Returns:
            The source parameter that was copied
        """
        print(" =====================")
        source = self.get_parameter_details(source_name)
        description = self.get_parameter_description(source_name)
        print(format_parameter(source.name, source.value, source.type, description))

        self.put_parameter(dest_name, description, source)
        print(f"Success copied parameter from {source_name} to {dest_name}")
        return source

    def migrate(self, name_map: Optional[Dict[str, str]] = None) -> Dict:
        """
        Copy every parameter in the mapping, stopping at the first failure.

        Args:
            name_map: Old name -> new name mapping (defaults to get_name_map())

        Returns:
            Dict summarising the run: total_pairs, copied, copied_params
        """
        if name_map is None:
            name_map = self.get_name_map()

        summary = {
            'total_pairs': len(name_map),
            'copied': 0,
            'copied_params': {},
        }

        for old_name, new_name in name_map.items():
            print(f"oldName: {old_name} == newName: {new_name}")
            self.copy_parameter(old_name, new_name)
            summary['copied'] += 1
            summary['copied_params'][old_name] = new_name

        return summary
