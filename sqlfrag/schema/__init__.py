"""sqlfrag schema models: data types, operators and parameters."""
from sqlfrag.schema.data_types import DataType, infer_data_type
from sqlfrag.schema.operators import OperatorRegistry, OperatorSpec, SqlOperator
from sqlfrag.schema.parameter import Parameter, bind_values

__all__ = [
    "DataType",
    "infer_data_type",
    "OperatorRegistry",
    "OperatorSpec",
    "SqlOperator",
    "Parameter",
    "bind_values",
]
