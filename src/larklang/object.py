# src/larklang/object.py
from collections import namedtuple

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
STRING_OBJ = "STRING"
NULL_OBJ = "NULL"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"

# Keys of a Hash. Two hashable values with the same content produce equal keys.
HashKey = namedtuple("HashKey", ["type", "value"])
HashPair = namedtuple("HashPair", ["key", "value"])


class Object:
    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"


class Hashable:
    """Mixin for values usable as Hash keys."""
    def hash_key(self):
        raise NotImplementedError("Subclasses must implement this method")


class Integer(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ
    def hash_key(self): return HashKey(INTEGER_OBJ, self.value)

class Boolean(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ
    def hash_key(self): return HashKey(BOOLEAN_OBJ, 1 if self.value else 0)

class String(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def hash_key(self): return HashKey(STRING_OBJ, self.value)
    def __str__(self): return self.value

class Null(Object):
    def inspect(self): return "null"
    def type(self): return NULL_OBJ

class Array(Object):
    def __init__(self, elements): self.elements = elements
    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"
    def type(self): return ARRAY_OBJ

class Hash(Object):
    def __init__(self, pairs=None):
        self.pairs = pairs if pairs is not None else {}  # HashKey -> HashPair

    def type(self): return HASH_OBJ

    def inspect(self):
        pairs = [f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()]
        return "{" + ", ".join(pairs) + "}"

    def get(self, key):
        """Look up a hashable key object; returns None when absent."""
        pair = self.pairs.get(key.hash_key())
        return pair.value if pair is not None else None

class Function(Object):
    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = parameters, body, env
    def inspect(self):
        params = ", ".join([p.value for p in self.parameters])
        return f"fn({params}) {{\n{self.body}\n}}"
    def type(self): return FUNCTION_OBJ

class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # native Python callable taking Objects, returning an Object
        self.name = name

    def inspect(self):
        return "builtin function"

    def type(self):
        return BUILTIN_OBJ

    def __repr__(self):
        return f"<BUILTIN {self.name}>"

class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ

class Error(Object):
    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ


# Shared singletons
NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean(value):
    return TRUE if value else FALSE
