"""
List views backed by an observable collection of rows.

The native side is a `QStandardItemModel` shown in a `QTreeView`. The Python
side is an `ObservableList` of rows; every mutation of it rebuilds the model
from scratch, so the model is always a direct projection of `rows`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from PySide6.QtGui import QStandardItem, QStandardItemModel
from PySide6.QtWidgets import QTreeView

from interphase import application
from interphase.helpers.observable import ObservableList
from interphase.widgets.widget import Setup, Widget

logger = logging.getLogger(__name__)


def _render(value: Any) -> str:
    return "" if value is None else str(value)


class ListView(Widget):
    """
    A list view which can be populated with rows of values.

    Parameters
    ----------
    columns:
        Column names, in display order.
    name, setup:
        See `Widget`.

    Raises
    ------
    ValueError
        If no columns are given.
    """

    def __init__(
        self,
        columns: Sequence[str],
        *,
        name: str | None = None,
        setup: Setup | None = None,
    ) -> None:
        self._columns = tuple(str(column) for column in columns)
        if not self._columns:
            raise ValueError("ListView needs at least one column")

        application.ensure_application()
        view = QTreeView()
        view.setRootIsDecorated(False)
        view.setUniformRowHeights(True)

        self._store = QStandardItemModel(0, len(self._columns), view)
        self._store.setHorizontalHeaderLabels(list(self._columns))
        view.setModel(self._store)

        super().__init__(view, name=name)

        self._rows: ObservableList[Sequence[Any]] = ObservableList(
            on_change=self.refresh_rows,
            validate=self._validate_row,
        )
        self.refresh_rows()
        self.configure(setup)

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def store(self) -> QStandardItemModel:
        """The native model mirroring `rows`."""
        return self._store

    @property
    def rows(self) -> ObservableList[Sequence[Any]]:
        """Rows shown by the view. Mutating this refreshes the view."""
        return self._rows

    @rows.setter
    def rows(self, value: Iterable[Sequence[Any]]) -> None:
        self._rows.replace(value)

    def _validate_row(self, row: Sequence[Any]) -> None:
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise TypeError(f"ListView rows must be sequences of column values, got {row!r}")
        if len(row) > len(self._columns):
            raise ValueError(
                f"Row has {len(row)} values but the view has {len(self._columns)} columns: {row!r}"
            )

    def refresh_rows(self) -> None:
        """
        Rebuild the native store from `rows`.

        Called automatically whenever `rows` is mutated. Rows are checked
        before the store is cleared, so a rejected row leaves it untouched.
        """
        for data_row in self._rows:
            self._validate_row(data_row)

        self._store.removeRows(0, self._store.rowCount())

        width = len(self._columns)
        for data_row in self._rows:
            values = list(data_row) + [None] * (width - len(data_row))
            items = []
            for value in values:
                item = QStandardItem(_render(value))
                item.setEditable(False)
                items.append(item)
            self._store.appendRow(items)

        logger.debug("Refreshed %r with %d rows", self, len(self._rows))

    def selected_indices(self) -> list[int]:
        """Indices of the currently selected rows, ascending."""
        selection = self.native.selectionModel()
        if selection is None:
            return []
        return sorted({index.row() for index in selection.selectedRows()})


class SimpleListView(ListView):
    """
    A single-column list view populated from a flat list of items.

    The column header is hidden.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        *,
        column: str = "",
        name: str | None = None,
        setup: Setup | None = None,
    ) -> None:
        super().__init__([column], name=name)
        self.native.setHeaderHidden(True)
        self.items = items
        self.configure(setup)

    @property
    def items(self) -> list[Any]:
        return [row[0] if row else None for row in self.rows]

    @items.setter
    def items(self, values: Iterable[Any]) -> None:
        self.rows = [[value] for value in values]
