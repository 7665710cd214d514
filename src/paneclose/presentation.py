"""Rendering of the registry read for a viewport.

PUBLIC API:
  - render: Build the rich Text shown by the UI
"""

from rich.text import Text

from .config import KeyBindingConfig
from .registry import SnapshotRegistry
from .types import ConfirmationState, MergedPaneRecord, PaneID, Variant

__all__ = ["render"]


def _describe(record: MergedPaneRecord) -> str:
    title = record.pane.title or "(untitled)"
    return f"{title}  [tab {record.tab.name}]"


def _hints(variant: Variant, state: ConfirmationState, bindings: KeyBindingConfig) -> list[tuple[str, str]]:
    """(key, action) pairs valid in the current state."""
    if variant == "echo":
        return [(str(bindings.confirm), "echo"), (str(bindings.cancel), "cancel")]
    if variant == "two-key":
        return [(str(bindings.confirm), "close pane"), (str(bindings.cancel), "cancel")]
    if state == ConfirmationState.AWAITING_CONFIRMATION:
        return [(str(bindings.confirm), "confirm close"), (str(bindings.cancel), "cancel")]
    return [(str(bindings.accept), "close pane"), (str(bindings.cancel), "cancel")]


def render(
    registry: SnapshotRegistry,
    state: ConfirmationState,
    bindings: KeyBindingConfig,
    variant: Variant,
    rows: int,
    cols: int,
    own_pane: PaneID | None = None,
) -> Text:
    """Render target pane, key hints, and the pane list within rows x cols.

    Args:
        registry: Current merged view
        state: Controller state
        bindings: Resolved key bindings
        variant: Controller variant, selects the hints shown
        rows: Viewport height
        cols: Viewport width
        own_pane: Pane running this UI, if any. Warns when it is the target.

    Returns:
        Text no taller than rows, each line cropped to cols
    """
    target = registry.target()
    record = registry.lookup(target) if target is not None else None

    lines: list[Text] = [Text(f"paneclose  {rows}x{cols}", style="dim")]

    if target is None:
        lines.append(Text("No pane focused", style="yellow"))
    elif record is None:
        lines.append(Text(f"Pane {target} (no longer listed)", style="yellow"))
    else:
        line = Text("Close ")
        line.append(_describe(record), style="bold cyan")
        line.append("?")
        lines.append(line)

    if target is not None and target == own_pane:
        lines.append(Text("This is the pane running paneclose", style="bold red"))

    if state == ConfirmationState.AWAITING_CONFIRMATION:
        lines.append(Text("Armed: confirm to close", style="bold red"))

    hints = Text()
    for key, action in _hints(variant, state, bindings):
        if hints:
            hints.append("  ")
        hints.append(f"<{key}>", style="bold green")
        hints.append(f" {action}")
    lines.append(hints)

    if registry.merged_panes:
        lines.append(Text(""))
    for merged in registry.merged_panes:
        marker = ">" if merged.pane_id == target else " "
        style = "cyan" if merged.pane_id == target else ""
        lines.append(Text(f"{marker} {merged.pane_id:>3}  {_describe(merged)}", style=style))

    lines = lines[: max(rows, 0)]
    for line in lines:
        line.truncate(max(cols, 0), overflow="crop")

    return Text("\n").join(lines)
