"""
Static description of the remote methods supported by the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional

from .errors import ConfigurationError

__all__ = [
    "COMMON_RESPONSE_FIELDS",
    "ERROR_FIELDS",
    "ERRORS_ATTRIBUTE",
    "GET_BALANCE",
    "GET_TRANSACTION_DETAILS",
    "METHOD_SPECS",
    "MethodSpec",
    "TRANSACTION_SEARCH",
    "build_method_table",
    "lookup_method",
]

GET_BALANCE = "GetBalance"
GET_TRANSACTION_DETAILS = "GetTransactionDetails"
TRANSACTION_SEARCH = "TransactionSearch"

ERRORS_ATTRIBUTE = "ERRORS"

COMMON_RESPONSE_FIELDS = (
    "ACK",
    "CORRELATIONID",
    "TIMESTAMP",
    "VERSION",
    "BUILD",
)

ERROR_FIELDS: FrozenSet[str] = frozenset(
    {
        "ERRORCODE",
        "SHORTMESSAGE",
        "LONGMESSAGE",
        "SEVERITYCODE",
        "ERRORPARAMID",
        "ERRORPARAMVALUE",
    }
)


@dataclass(frozen=True)
class MethodSpec:
    """
    Protocol version and list layout of a single remote method.

    ``list_attribute`` names the attribute the method's list fields are
    grouped under; it is ``None`` when the response carries no list.
    """

    name: str
    version: str
    list_attribute: Optional[str] = None
    data_fields: FrozenSet[str] = frozenset()

    @property
    def has_data_list(self) -> bool:
        return self.list_attribute is not None and bool(self.data_fields)


def build_method_table(specs: Iterable[MethodSpec]) -> Mapping[str, MethodSpec]:
    table = {}
    for spec in specs:
        if spec.name in table:
            raise ConfigurationError(f"Method {spec.name} is configured twice")
        if spec.data_fields and spec.list_attribute is None:
            raise ConfigurationError(
                f"Method {spec.name} declares data fields but no list attribute"
            )
        table[spec.name] = spec
    return MappingProxyType(table)


METHOD_SPECS: Mapping[str, MethodSpec] = build_method_table(
    (
        MethodSpec(
            name=GET_BALANCE,
            version="204",
            list_attribute="BALANCES",
            data_fields=frozenset({"AMT", "CURRENCYCODE"}),
        ),
        MethodSpec(name=GET_TRANSACTION_DETAILS, version="204"),
        MethodSpec(
            name=TRANSACTION_SEARCH,
            version="204",
            list_attribute="TRANSACTIONS",
            data_fields=frozenset(
                {
                    "TIMESTAMP",
                    "TIMEZONE",
                    "TYPE",
                    "EMAIL",
                    "NAME",
                    "TRANSACTIONID",
                    "STATUS",
                    "AMT",
                    "CURRENCYCODE",
                    "FEEAMT",
                    "NETAMT",
                }
            ),
        ),
    )
)


def lookup_method(
    method: str,
    methods: Mapping[str, MethodSpec] = METHOD_SPECS,
) -> MethodSpec:
    try:
        return methods[method]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unsupported NVP method '{method}'; no protocol version is configured"
        ) from exc
