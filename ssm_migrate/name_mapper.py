"""
Name mapping between the old and new parameter hierarchies.

Old names look like /{namespace}/{environment}/{variable}; new names insert a
subsystem segment: /{namespace}/{subsystem}/{environment}/{variable}.
"""

from typing import Dict, Iterable


def generate_old_name(namespace: str, environment: str, variable: str) -> str:
    """Build a name in the old /{namespace}/{environment}/{variable} format."""
    return f"/{namespace}/{environment}/{variable}"


def generate_new_name(namespace: str, subsystem: str, environment: str, variable: str) -> str:
    """Build a name in the new /{namespace}/{subsystem}/{environment}/{variable} format."""
    return f"/{namespace}/{subsystem}/{environment}/{variable}"


def generate_name_map(environment: str, variables: Iterable[str],
                      namespace: str, subsystem: str) -> Dict[str, str]:
    """
    Generate the mapping from old parameter names to new ones.

    Args:
        environment: Environment label, e.g. "staging"
        variables: Ordered variable identifiers to migrate
        namespace: Leading path segment shared by both hierarchies
        subsystem: Segment inserted after the namespace in new names

    Returns:
        Dict of old name -> new name, in the order of ``variables``
    """
    name_map = {}
    for variable in variables:
        old_name = generate_old_name(namespace, environment, variable)
        name_map[old_name] = generate_new_name(namespace, subsystem, environment, variable)
    return name_map
