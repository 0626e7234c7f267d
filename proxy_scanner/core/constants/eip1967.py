# Storage slots per EIP-1967 (https://eips.ethereum.org/EIPS/eip-1967)

# bytes32(uint256(keccak256('eip1967.proxy.admin')) - 1)
ADMIN_SLOT = "0xb53127684a568b3173ae13b9f8a6016e243e63b6e8ee1178d6a717850b5d6103"

# bytes32(uint256(keccak256('eip1967.proxy.implementation')) - 1)
IMPLEMENTATION_SLOT = (
    "0x360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc"
)

# bytes32(uint256(keccak256('eip1967.proxy.beacon')) - 1)
# Only consulted when the implementation slot is empty.
BEACON_SLOT = "0xa3f0ad74e5423aebfd80d3ef4346578335a9a72aeaee59ff6cb3582b35133d50"

SLOT_NAMES: dict[str, str] = {
    ADMIN_SLOT: "admin",
    IMPLEMENTATION_SLOT: "implementation",
    BEACON_SLOT: "beacon",
}

STORAGE_WORD_SIZE = 32
ADDRESS_SIZE = 20

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
