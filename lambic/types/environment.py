"""Runtime environment for Lambic.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared by reference: a closure
keeps the frame it was created in alive, and sees later `define`s into it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from lambic import LispValue
from lambic.errors import InvalidBindingForm, UnboundVariable
from lambic.types.symbol import Symbol


class _Unassigned:
    """Placeholder held by a letrec name until its value is bound."""

    __slots__ = ()

    def __repr__(self):
        return "#<unassigned>"


UNASSIGNED = _Unassigned()


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def fork(self) -> Environment:
        """Return a new, empty frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        An existing slot for `name` in this frame is overwritten in place, so
        closures holding this frame observe the new value. A same-named
        binding in an outer frame is never touched; the new slot shadows it.

        Raises InvalidBindingForm if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise InvalidBindingForm(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Insert a slot into this (freshly forked) frame unconditionally."""
        if not isinstance(name, Symbol):
            raise InvalidBindingForm(f"Cannot bind {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outward to the root.

        Raises UnboundVariable if no frame binds `name`, or if the nearest
        binding is a letrec name whose value has not been assigned yet.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        val = env.vars[name]
        if val is UNASSIGNED:
            raise UnboundVariable(
                name, f"Variable {name} used before its letrec binding was assigned"
            )
        return val

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def depth(self) -> int:
        """Number of frames from this one up to and including the root."""
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for env in self.frames():
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
