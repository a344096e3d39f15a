"""
Display names for PostgreSQL column types.

Maps the ``data_type`` values reported by ``information_schema.columns`` to
the short type names used in reports. The names match the DBAL type class
names so reports line up with ones produced by existing tooling.
"""

TYPE_NAMES: dict[str, str] = {
    # Integers
    "smallint": "SmallIntType",
    "integer": "IntegerType",
    "bigint": "BigIntType",
    # Exact / approximate numerics
    "numeric": "DecimalType",
    "decimal": "DecimalType",
    "real": "SmallFloatType",
    "double precision": "FloatType",
    "money": "DecimalType",
    # Text
    "character varying": "StringType",
    "character": "StringType",
    "text": "TextType",
    "name": "StringType",
    "citext": "TextType",
    # Boolean
    "boolean": "BooleanType",
    # Date / time
    "date": "DateType",
    "time without time zone": "TimeType",
    "time with time zone": "TimeType",
    "timestamp without time zone": "DateTimeType",
    "timestamp with time zone": "DateTimeTzType",
    "interval": "DateIntervalType",
    # Binary
    "bytea": "BlobType",
    # Structured
    "uuid": "GuidType",
    "json": "JsonType",
    "jsonb": "JsonType",
    "ARRAY": "SimpleArrayType",
    # Network
    "inet": "StringType",
    "cidr": "StringType",
    "macaddr": "StringType",
}


def column_type_name(data_type: str) -> str:
    """
    Get the short display name for a driver type identifier.

    Unknown identifiers (domains, enums, extension types) are returned as-is.

    Args:
        data_type: Type identifier as reported by information_schema

    Returns:
        Display name for the type
    """
    return TYPE_NAMES.get(data_type, data_type)
