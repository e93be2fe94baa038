"""
Decoded chain records.

Immutable value objects handed over by the block decoder. Each record
normalizes its values on construction and knows how to render itself as
a row for its table. Records also accept the decoder's camelCase payloads
through ``from_decoded``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from chain_store.utils.exceptions import InvalidRecordError
from chain_store.validators.amounts import (
    normalize_amount,
    normalize_ratio,
    validate_height,
    validate_int,
)


def _require(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present key of a decoded payload."""
    for key in keys:
        if key in data:
            return data[key]
    raise InvalidRecordError(f"missing field {keys[0]!r}")


def _hex(value: Any) -> str:
    """Normalize a hash to its 0x-prefixed hex string."""
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if not isinstance(value, str) or not value:
        raise InvalidRecordError(f"hash must be a hex string, got {value!r}")
    return value if value.startswith("0x") else f"0x{value}"


@dataclass(frozen=True)
class BlockHeader:
    """Header of the block a validator/event batch was extracted from."""
    number: int
    hash: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "number", validate_height(self.number, "number"))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> BlockHeader:
        block_hash = data.get("hash")
        return cls(
            number=_require(data, "number", "height"),
            hash=_hex(block_hash) if block_hash is not None else None,
        )


@dataclass(frozen=True)
class BlockRecord:
    """A processed block."""
    height: int
    hash: str
    author_addr: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", validate_height(self.height))
        object.__setattr__(self, "hash", _hex(self.hash))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> BlockRecord:
        return cls(
            height=_require(data, "number", "height"),
            hash=_require(data, "hash"),
            author_addr=_require(data, "authorAddr", "author_addr"),
        )

    def as_row(self) -> dict[str, Any]:
        return {
            "height": self.height,
            "hash": self.hash,
            "author_addr": self.author_addr,
        }


@dataclass(frozen=True)
class AuthorRecord:
    """
    Last block produced by an author.

    Written once per processed block; callers must write in non-decreasing
    height order for the stored pointer to be the author's latest block.
    """
    author_addr: str
    height: int
    hash: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", validate_height(self.height))
        object.__setattr__(self, "hash", _hex(self.hash))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> AuthorRecord:
        return cls(
            author_addr=_require(data, "authorAddr", "author_addr"),
            height=_require(data, "number", "height"),
            hash=_require(data, "hash"),
        )

    def as_row(self) -> dict[str, Any]:
        return {
            "author_addr": self.author_addr,
            "last_block_height": self.height,
            "last_block_hash": self.hash,
        }


@dataclass(frozen=True)
class ValidatorRecord:
    """Validator snapshot observed at a block."""
    current_era: int
    current_session: int
    validator_addr: str
    validator_name: str | None
    controller_addr: str | None
    controller_name: str | None
    online: bool
    era_point: int
    reward_destination: str | None
    commission: str | None
    total_bonded: str
    self_bonded: str
    nominators: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_era", validate_int(self.current_era, "current_era", 0))
        object.__setattr__(self, "current_session", validate_int(self.current_session, "current_session", 0))
        object.__setattr__(self, "era_point", validate_int(self.era_point, "era_point", 0))
        object.__setattr__(self, "nominators", validate_int(self.nominators, "nominators", 0))
        object.__setattr__(self, "total_bonded", normalize_amount(self.total_bonded, "total_bonded"))
        object.__setattr__(self, "self_bonded", normalize_amount(self.self_bonded, "self_bonded"))
        if self.commission is not None:
            object.__setattr__(self, "commission", str(self.commission))
        object.__setattr__(self, "online", bool(self.online))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> ValidatorRecord:
        return cls(
            current_era=_require(data, "currentEra", "current_era"),
            current_session=_require(data, "currentIndex", "currentSession", "current_session"),
            validator_addr=_require(data, "validatorAddr", "validator_addr"),
            validator_name=data.get("validatorName", data.get("validator_name")),
            controller_addr=data.get("controllerAddr", data.get("controller_addr")),
            controller_name=data.get("controllerName", data.get("controller_name")),
            online=_require(data, "online"),
            era_point=_require(data, "eraPoint", "era_point"),
            reward_destination=data.get("rewardDestination", data.get("reward_destination")),
            commission=data.get("commission"),
            total_bonded=_require(data, "totalBonded", "total_bonded"),
            self_bonded=_require(data, "selfBonded", "self_bonded"),
            nominators=data.get("nominators", 0),
        )

    def as_row(self, height: int) -> dict[str, Any]:
        return {
            "height": height,
            "current_era": self.current_era,
            "current_session": self.current_session,
            "validator_addr": self.validator_addr,
            "validator_name": self.validator_name,
            "controller_addr": self.controller_addr,
            "controller_name": self.controller_name,
            "online": self.online,
            "era_point": self.era_point,
            "reward_destination": self.reward_destination,
            "commission": self.commission,
            "total_bonded": self.total_bonded,
            "self_bonded": self.self_bonded,
            "nominators": self.nominators,
        }


@dataclass(frozen=True)
class RewardEventRecord:
    """A staking.Reward event split between validators and treasury."""
    index: int
    validators_amount: str
    treasury_amount: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", validate_int(self.index, "index", 0))
        object.__setattr__(self, "validators_amount", normalize_amount(self.validators_amount, "validators_amount"))
        object.__setattr__(self, "treasury_amount", normalize_amount(self.treasury_amount, "treasury_amount"))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> RewardEventRecord:
        return cls(
            index=_require(data, "index"),
            validators_amount=_require(data, "validatorsAmount", "validators_amount"),
            treasury_amount=_require(data, "treasuryAmount", "treasury_amount"),
        )

    def as_row(self, height: int) -> dict[str, Any]:
        return {
            "height": height,
            "index": self.index,
            "validators_amount": self.validators_amount,
            "treasury_amount": self.treasury_amount,
        }


@dataclass(frozen=True)
class SlashEventRecord:
    """A staking.Slash event."""
    index: int
    account_addr: str
    amount: str
    nickname: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", validate_int(self.index, "index", 0))
        object.__setattr__(self, "amount", normalize_amount(self.amount))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> SlashEventRecord:
        return cls(
            index=_require(data, "index"),
            account_addr=_require(data, "accountAddr", "account_addr"),
            amount=_require(data, "amount"),
            nickname=data.get("nickname"),
        )

    def as_row(self, height: int) -> dict[str, Any]:
        return {
            "height": height,
            "index": self.index,
            "account_addr": self.account_addr,
            "nickname": self.nickname,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class TokenDistributionRecord:
    """Token supply and staking snapshot computed at a block."""
    height: int
    current_era: int
    current_session: int
    total_issuance: str
    total_bond: str
    validators_count: int
    staking_ratio: Decimal
    inflation: Decimal
    val_day_rewards: str = field(default="0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", validate_height(self.height))
        object.__setattr__(self, "current_era", validate_int(self.current_era, "current_era", 0))
        object.__setattr__(self, "current_session", validate_int(self.current_session, "current_session", 0))
        object.__setattr__(self, "validators_count", validate_int(self.validators_count, "validators_count", 0))
        object.__setattr__(self, "total_issuance", normalize_amount(self.total_issuance, "total_issuance"))
        object.__setattr__(self, "total_bond", normalize_amount(self.total_bond, "total_bond"))
        object.__setattr__(self, "val_day_rewards", normalize_amount(self.val_day_rewards, "val_day_rewards"))
        object.__setattr__(self, "staking_ratio", normalize_ratio(self.staking_ratio, "staking_ratio"))
        object.__setattr__(self, "inflation", normalize_ratio(self.inflation, "inflation"))

    @classmethod
    def from_decoded(cls, data: Mapping[str, Any]) -> TokenDistributionRecord:
        return cls(
            height=_require(data, "height", "number"),
            current_era=_require(data, "currentEra", "current_era"),
            current_session=_require(data, "currentIndex", "currentSession", "current_session"),
            total_issuance=_require(data, "totalIssuance", "total_issuance"),
            total_bond=_require(data, "totalBond", "total_bond"),
            validators_count=_require(data, "validatorsCount", "validators_count"),
            staking_ratio=_require(data, "stakingRatio", "staking_ratio"),
            inflation=_require(data, "inflation"),
            val_day_rewards=_require(data, "rewardPerValPerDay", "valDayRewards", "val_day_rewards"),
        )

    def as_row(self) -> dict[str, Any]:
        return {
            "height": self.height,
            "current_era": self.current_era,
            "current_session": self.current_session,
            "total_issuance": self.total_issuance,
            "total_bond": self.total_bond,
            "validators_count": self.validators_count,
            "staking_ratio": self.staking_ratio,
            "inflation": self.inflation,
            "val_day_rewards": self.val_day_rewards,
        }
