from eth_utils import is_address, to_checksum_address

from estate_registry.core.errors import InvalidPrincipalError


def to_principal(value) -> str:
    """
    Normalise an account address to its EIP-55 checksum form.
    Principals compare by value, so every address must pass through here first.
    """
    if not isinstance(value, str) or not is_address(value):
        raise InvalidPrincipalError(value)
    return to_checksum_address(value)
