from dataclasses import dataclass
from typing import Any, List, Optional

@dataclass
class Span:
    line: int
    col: int

    def __str__(self) -> str:
        return f'[line {self.line}, col {self.col}]'


@dataclass
class TagIdentifier:
    value: str
    span: Optional[Span] = None
    info: Optional[Any] = None  # TagEngineInfo attached by the evaluator, if any

    def __str__(self) -> str:
        return f'${self.value}'


def span_list(*spans: Optional[Span]) -> List[Span]:
    """Return the distinct, non-empty spans in call order."""
    out: List[Span] = []
    for sp in spans:
        if sp is not None and sp not in out:
            out.append(sp)
    return out
