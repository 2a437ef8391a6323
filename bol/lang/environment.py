"""Variable storage for Bol. Environments form a parent-linked chain: every if/while block gets a child of the
enclosing environment, every function call a child of the global one.

    declare -> current environment only (error if already declared here; shadowing a parent is fine)
    assign  -> nearest environment holding the name (error if none)
    get     -> nearest environment holding the name (error if none)
"""

from bol.lang.error import BolRuntimeError


class Environment:

    def __init__(self, parent=None):
        self.parent = parent
        self.values = {}

    def declare(self, name, value):
        if name in self:
            raise BolRuntimeError(f"'{name}' is already declared in this scope", text=name)
        self.values[name] = value

    def assign(self, name, value):
        env = self.resolve(name)
        if env is None:
            raise BolRuntimeError(f"'{name}' is not declared; declare it first with 'he ghe {name} = ...'", text=name)
        env.values[name] = value

    def get(self, name):
        env = self.resolve(name)
        if env is None:
            raise BolRuntimeError(f"'{name}' is not declared", text=name)
        return env.values[name]

    def resolve(self, name):
        """Returns the nearest environment in the chain (starting at self) that holds name, or None."""
        env = self
        while env is not None:
            if name in env:
                return env
            env = env.parent
        return None

    def __contains__(self, name):
        return name in self.values
