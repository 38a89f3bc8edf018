from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

PAGE_SIZE_LIST: int = 9


def paginate(items: Sequence[T], page_size: int = PAGE_SIZE_LIST) -> Tuple[Tuple[T, ...], ...]:
    """Split ``items`` into contiguous pages; empty input yields no pages."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return tuple(tuple(items[start:start + page_size]) for start in range(0, len(items), page_size))


@dataclass(frozen=True)
class PaginationState:
    total_pages: int
    current_index: int = 0

    @classmethod
    def initial(cls, total_pages: int) -> "PaginationState":
        return cls(total_pages=max(total_pages, 0), current_index=0)

    @property
    def is_empty(self) -> bool:
        return self.total_pages == 0

    @property
    def has_prev(self) -> bool:
        return self.current_index > 0

    @property
    def has_next(self) -> bool:
        return self.current_index < self.total_pages - 1


class NavAction(str, Enum):
    GOTO = "goto"
    NEXT = "next"
    PREV = "prev"


@dataclass(frozen=True)
class NavCommand:
    action: NavAction
    index: Optional[int] = None

    @classmethod
    def go_to(cls, index: int) -> "NavCommand":
        return cls(NavAction.GOTO, index)

    @classmethod
    def next(cls) -> "NavCommand":
        return cls(NavAction.NEXT)

    @classmethod
    def prev(cls) -> "NavCommand":
        return cls(NavAction.PREV)


def reduce(state: PaginationState, command: NavCommand) -> PaginationState:
    """Apply a navigation command; out-of-range moves return ``state`` unchanged."""
    if command.action is NavAction.GOTO:
        index = command.index
        if index is None or not 0 <= index < state.total_pages or index == state.current_index:
            return state
        return replace(state, current_index=index)
    if command.action is NavAction.NEXT:
        return replace(state, current_index=state.current_index + 1) if state.has_next else state
    if command.action is NavAction.PREV:
        return replace(state, current_index=state.current_index - 1) if state.has_prev else state
    return state


def go_to(state: PaginationState, index: int) -> PaginationState:
    return reduce(state, NavCommand.go_to(index))


def next_page(state: PaginationState) -> PaginationState:
    return reduce(state, NavCommand.next())


def prev_page(state: PaginationState) -> PaginationState:
    return reduce(state, NavCommand.prev())


def current_page(pages: Sequence[Tuple[T, ...]], state: PaginationState) -> Tuple[T, ...]:
    if not pages or not 0 <= state.current_index < len(pages):
        return ()
    return pages[state.current_index]
