"""Category taxonomy and descriptive refinements."""

from enum import Enum


MAX_SAFE_INTEGER = 2**53 - 1


class _UndefinedType:
    """Type of the ``UNDEFINED`` sentinel.

    Marks a value that was never bound, as opposed to ``None`` which marks an
    explicit absence.
    """

    _instance: "_UndefinedType | None" = None

    def __new__(cls) -> "_UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _UndefinedType()


class Category(str, Enum):
    """Classification tags returned by :func:`valuekind.classify`."""

    # Absence
    UNDEFINED = "undefined"
    NULL = "null"

    # Primitives
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"

    # Structured built-ins
    ARRAY = "Array"
    OBJECT = "Object"
    REGEXP = "RegExp"
    DATE = "Date"
    ERROR = "Error"
    MAP = "Map"
    SET = "Set"
    WEAK_MAP = "WeakMap"
    WEAK_SET = "WeakSet"
    PROMISE = "Promise"

    # Callables
    FUNCTION = "Function"

    # Fixed-width binary array views
    INT8_ARRAY = "Int8Array"
    UINT8_ARRAY = "Uint8Array"
    UINT8_CLAMPED_ARRAY = "Uint8ClampedArray"
    INT16_ARRAY = "Int16Array"
    UINT16_ARRAY = "Uint16Array"
    INT32_ARRAY = "Int32Array"
    UINT32_ARRAY = "Uint32Array"
    FLOAT16_ARRAY = "Float16Array"
    FLOAT32_ARRAY = "Float32Array"
    FLOAT64_ARRAY = "Float64Array"
    BIGINT64_ARRAY = "BigInt64Array"
    BIGUINT64_ARRAY = "BigUint64Array"

    # Raw memory
    ARRAY_BUFFER = "ArrayBuffer"
    DATA_VIEW = "DataView"

    # Suspension objects
    GENERATOR = "Generator"
    ASYNC_GENERATOR = "AsyncGenerator"

    def __str__(self) -> str:
        return self.value


PRIMITIVE_CATEGORIES = frozenset(
    {
        Category.UNDEFINED,
        Category.NULL,
        Category.STRING,
        Category.NUMBER,
        Category.BIGINT,
        Category.BOOLEAN,
        Category.SYMBOL,
    }
)

TYPED_ARRAY_CATEGORIES = frozenset(
    {
        Category.INT8_ARRAY,
        Category.UINT8_ARRAY,
        Category.UINT8_CLAMPED_ARRAY,
        Category.INT16_ARRAY,
        Category.UINT16_ARRAY,
        Category.INT32_ARRAY,
        Category.UINT32_ARRAY,
        Category.FLOAT16_ARRAY,
        Category.FLOAT32_ARRAY,
        Category.FLOAT64_ARRAY,
        Category.BIGINT64_ARRAY,
        Category.BIGUINT64_ARRAY,
    }
)


class TypeDescription(str, Enum):
    """Human-facing refinements used in assertion failure messages.

    These never take part in dispatch; :func:`valuekind.classify` only ever
    returns a :class:`Category`.
    """

    # Callable shapes
    CLASS = "Class"
    GENERATOR_FUNCTION = "GeneratorFunction"
    ASYNC_GENERATOR_FUNCTION = "AsyncGeneratorFunction"
    ASYNC_FUNCTION = "AsyncFunction"
    BOUND_FUNCTION = "bound Function"

    # Strings
    EMPTY_STRING = "empty string"
    NON_EMPTY_STRING = "non-empty string"
    EMPTY_STRING_OR_WHITESPACE = "empty string or whitespace"
    NUMERIC_STRING = "string with a number"
    URL_STRING = "string with a URL"

    # Numbers
    NAN = "NaN"
    INTEGER = "integer"
    SAFE_INTEGER = "safe integer"
    INFINITE = "infinite number"
    EVEN_INTEGER = "even integer"
    ODD_INTEGER = "odd integer"
    IN_RANGE = "in range"

    # Collections
    EMPTY_ARRAY = "empty array"
    NON_EMPTY_ARRAY = "non-empty array"
    EMPTY_OBJECT = "empty object"
    NON_EMPTY_OBJECT = "non-empty object"
    EMPTY_SET = "empty set"
    NON_EMPTY_SET = "non-empty set"
    EMPTY_MAP = "empty map"
    NON_EMPTY_MAP = "non-empty map"
    TYPED_ARRAY = "TypedArray"
    ARRAY_LIKE = "array-like"
    ITERABLE = "Iterable"
    ASYNC_ITERABLE = "AsyncIterable"

    # Objects
    PLAIN_OBJECT = "plain object"
    PROMISE = "Promise"
    NATIVE_PROMISE = "native Promise"
    URL_INSTANCE = "URL"
    DIRECT_INSTANCE_OF = "T"

    # Broad families
    NULL_OR_UNDEFINED = "null or undefined"
    PRIMITIVE = "primitive"
    TRUTHY = "truthy"
    FALSY = "falsy"

    def __str__(self) -> str:
        return self.value
