"""
资源状态机：显式转换表 (当前状态, 动作) -> 目标状态。
重复执行已生效的动作（当前状态即目标状态）视为幂等，不报错也不回退；其余非法转换抛 InvalidTransitionError。
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from .errors import InvalidTransitionError, ValidationError


class StateMachine:
    def __init__(self, resource: str, states: Iterable[str], transitions: Dict[str, Tuple[Iterable[str], str]]) -> None:
        """transitions: action -> (允许的源状态, 目标状态)。"""
        self.resource = resource
        self.states: Tuple[str, ...] = tuple(states)
        self._table: Dict[Tuple[str, str], str] = {}
        self._targets: Dict[str, str] = {}
        for action, (sources, target) in transitions.items():
            if target not in self.states:
                raise ValueError(f"{resource}: unknown target state {target}")
            self._targets[action] = target
            for s in sources:
                if s not in self.states:
                    raise ValueError(f"{resource}: unknown source state {s}")
                self._table[(s, action)] = target

    @property
    def actions(self) -> List[str]:
        return list(self._targets)

    def is_state(self, value: Optional[str]) -> bool:
        return value in self.states

    def next_state(self, current: str, action: str) -> str:
        """返回目标状态；幂等重复返回当前状态；非法时抛错。"""
        if action not in self._targets:
            raise InvalidTransitionError(self.resource, current, action)
        target = self._table.get((current, action))
        if target is not None:
            return target
        if current == self._targets[action]:
            return current
        raise InvalidTransitionError(self.resource, current, action)

    def reachable(self, current: str) -> Set[str]:
        seen = {current}
        frontier = [current]
        while frontier:
            s = frontier.pop()
            for (src, _action), target in self._table.items():
                if src == s and target not in seen:
                    seen.add(target)
                    frontier.append(target)
        return seen

    def check_patch(self, current: str, target: Optional[str]) -> None:
        """PATCH 直接改 status 时，目标须为当前状态或可由动作到达的状态。"""
        if target is None or target == current:
            return
        if target not in self.states:
            raise ValidationError(f"Invalid {self.resource} status: {target}")
        if target not in self.reachable(current):
            raise InvalidTransitionError(self.resource, current, "patch",
                                         f"Cannot change {self.resource} status from {current} to {target}")

    def validate_filter(self, value: Optional[str], strict: bool = True) -> Optional[str]:
        """status 查询参数校验：严格模式下未知取值报 400；宽松模式下忽略该过滤。"""
        if value is None or value == "":
            return None
        if value in self.states:
            return value
        if strict:
            raise ValidationError(f"Invalid {self.resource} status filter: {value}")
        return None
