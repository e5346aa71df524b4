# src/larklang/environment.py

class Environment:
    """A variable scope with an optional enclosing scope.

    Used for the top-level program state and for each function call. A
    ``Function`` keeps a reference to the environment it was defined in;
    calling it creates a fresh child of that environment.
    """

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    @classmethod
    def new_enclosed(cls, outer):
        """Create an empty scope whose lookups continue into ``outer``."""
        return cls(outer=outer)

    # ---- Core environment operations ---------------------------------------------

    def lookup(self, name):
        """Return ``(value, found)`` searching this scope then the outer chain."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name], True
            env = env.outer
        return None, False

    def get(self, name, default=None):
        """Get a value from the environment"""
        value, found = self.lookup(name)
        return value if found else default

    def set(self, name, value):
        """Bind ``name`` in this scope only (creates or rebinds)."""
        self.store[name] = value
        return value

    # ---- Membership -----------------------------------------------------------------

    def __contains__(self, name):
        return self.lookup(name)[1]

    def __repr__(self):
        names = ", ".join(sorted(self.store))
        return f"Environment([{names}], outer={'yes' if self.outer is not None else 'no'})"
