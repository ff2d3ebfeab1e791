"""PyQt6 implementation of the immediate-mode ``Surface``.

Qt widgets are retained objects, so this surface reconciles each frame's
calls against a cache of widgets keyed by container, kind, label and
occurrence:

 - a widget drawn this frame is created on first use, moved to its drawn
   position and shown
 - a widget not drawn this frame is hidden (kept for reuse)
 - user input arriving between frames is parked in ``_pending`` and handed
   back by the next call for that widget; every input schedules a frame

Layout containers (side panel, window bodies, scroll areas) hold widgets.
Menu containers (the menu bar and its menus) hold ``QAction`` objects, so a
toggle inside a menu is a checkable action and a button is a plain action
showing its shortcut text after a tab.

Window-manager commands (organize, reset memory) are deferred to
``end_frame`` so containers are never torn down mid-frame.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple, Union

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtGui import QAction, QDesktopServices, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QBoxLayout,
    QCheckBox,
    QDockWidget,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMdiArea,
    QMdiSubWindow,
    QMenu,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QSlider,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from gallery.components.surface import MenuHandle, WindowHandle, WindowOptions
from gallery.services.shortcut_registry import KeyboardShortcut

__all__ = ["QtSurface"]

_log = logging.getLogger(__name__)

_SLIDER_STEPS = 1000
_DEFAULT_WINDOW_SIZE = (320, 240)

ItemKey = Tuple[str, str, str, int]
Item = Union[QWidget, QAction]


class _Container:
    def __init__(self, key: str) -> None:
        self.key = key
        self.cursor = 0
        self._counts: Dict[Tuple[str, str], int] = {}

    def next_key(self, kind: str, text: str = "") -> ItemKey:
        n = self._counts.get((kind, text), 0)
        self._counts[(kind, text)] = n + 1
        return (self.key, kind, text, n)

    def reset(self) -> None:
        self.cursor = 0
        self._counts.clear()

    @property
    def holds_actions(self) -> bool:
        return False


class _LayoutContainer(_Container):
    def __init__(self, key: str, layout: QBoxLayout) -> None:
        super().__init__(key)
        self.layout = layout

    def place(self, widget: QWidget) -> None:
        index = self.layout.indexOf(widget)
        if index != self.cursor:
            if index >= 0:
                self.layout.removeWidget(widget)
            self.layout.insertWidget(self.cursor, widget)
        widget.setVisible(True)
        self.cursor += 1


class _MenuContainer(_Container):
    """Wraps a QMenu or the QMenuBar; both expose the QWidget action API."""

    def __init__(self, key: str, menu: QWidget) -> None:
        super().__init__(key)
        self.menu = menu

    @property
    def holds_actions(self) -> bool:
        return True

    def place(self, action: QAction) -> None:
        actions = self.menu.actions()
        if self.cursor >= len(actions) or actions[self.cursor] is not action:
            if action in actions:
                self.menu.removeAction(action)
                actions = self.menu.actions()
            if self.cursor < len(actions):
                self.menu.insertAction(actions[self.cursor], action)
            else:
                self.menu.addAction(action)
        action.setVisible(True)
        self.cursor += 1


class _SubWindow(QMdiSubWindow):
    def __init__(self, title: str, on_close: Callable[[str], None]) -> None:
        super().__init__()
        self._title = title
        self._on_close = on_close
        self.setWindowTitle(title)
        self.body = QWidget()
        self.body_layout = QVBoxLayout(self.body)
        self.body_layout.addStretch(1)
        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setWidget(self.body)
        self.setWidget(self.scroll)
        self.placed = False

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        event.ignore()
        self.hide()
        self._on_close(self._title)


class _SliderRow(QWidget):
    def __init__(self, text: str) -> None:
        super().__init__()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, _SLIDER_STEPS)
        self.value_label = QLabel()
        self.value_label.setMinimumWidth(56)
        layout.addWidget(self.slider, 1)
        layout.addWidget(self.value_label)
        layout.addWidget(QLabel(text))
        self.minimum = 0.0
        self.maximum = 1.0

    def to_value(self, position: int) -> float:
        return self.minimum + (self.maximum - self.minimum) * position / _SLIDER_STEPS

    def show_value(self, value: float, minimum: float, maximum: float) -> None:
        self.minimum, self.maximum = minimum, maximum
        span = maximum - minimum
        position = round((value - minimum) / span * _SLIDER_STEPS) if span else 0
        self.slider.blockSignals(True)
        self.slider.setValue(position)
        self.slider.blockSignals(False)
        self.value_label.setText(f"{value:.2f}".rstrip("0").rstrip("."))


class QtSurface:
    def __init__(self, host: QMainWindow, *, request_frame: Callable[[], None]) -> None:
        self._host = host
        self._request_frame = request_frame
        self._mdi = QMdiArea()
        host.setCentralWidget(self._mdi)
        self._base_point_size = host.font().pointSizeF()
        self._zoom_factor = 1.0

        self._items: Dict[ItemKey, Item] = {}
        self._touched: Set[ItemKey] = set()
        self._pending: Dict[ItemKey, Any] = {}
        self._windows: Dict[str, _SubWindow] = {}
        self._windows_touched: Set[str] = set()
        self._window_closes: Set[str] = set()
        self._docks: Dict[str, Tuple[QDockWidget, _LayoutContainer]] = {}
        self._docks_touched: Set[str] = set()
        self._containers: Dict[str, _Container] = {}
        self._stack: List[_Container] = []
        self._menu_handles: List[MenuHandle] = []
        self._shortcuts: Dict[str, QShortcut] = {}
        self._pressed: Set[str] = set()
        self._organize_pending = False
        self._reset_pending = False
        self._in_frame = False

    # Frame lifecycle ------------------------------------------------------
    def begin_frame(self) -> None:
        self._touched.clear()
        self._windows_touched.clear()
        self._docks_touched.clear()
        for container in self._containers.values():
            container.reset()
        self._stack.clear()
        self._in_frame = True

    def end_frame(self) -> None:
        self._in_frame = False
        for key, item in self._items.items():
            if key not in self._touched:
                item.setVisible(False)
        for title, window in self._windows.items():
            if title not in self._windows_touched and window.isVisible():
                window.hide()
        for dock_id, (dock, _container) in self._docks.items():
            if dock_id not in self._docks_touched:
                dock.hide()
        # Input on widgets that vanished this frame has no reader anymore.
        for key in [k for k in self._pending if k not in self._touched]:
            del self._pending[key]
        # A close only applies to a window drawn this frame.
        self._window_closes &= self._windows_touched
        self._pressed.clear()
        if self._organize_pending:
            self._organize_pending = False
            self._mdi.cascadeSubWindows()
        if self._reset_pending:
            self._reset_pending = False
            self._forget_everything()
            self._request_frame()

    def _forget_everything(self) -> None:
        for item in self._items.values():
            qmenu = getattr(item, "qmenu", None)
            if qmenu is not None:
                qmenu.deleteLater()
            # A menu action is owned by its QMenu and goes with it.
            if not (isinstance(item, QAction) and qmenu is not None):
                item.deleteLater()
        for window in self._windows.values():
            self._mdi.removeSubWindow(window)
            window.deleteLater()
        for dock, _container in self._docks.values():
            self._host.removeDockWidget(dock)
            dock.deleteLater()
        self._items.clear()
        self._pending.clear()
        self._windows.clear()
        self._window_closes.clear()
        self._docks.clear()
        self._containers.clear()
        _log.info("Surface memory reset")

    def _input(self, key: ItemKey, value: Any) -> None:
        self._pending[key] = value
        self._request_frame()

    # Metrics --------------------------------------------------------------
    def screen_size(self) -> Tuple[float, float]:
        return (self._host.width() / self._zoom_factor, self._host.height() / self._zoom_factor)

    def available_height(self) -> float:
        return self._mdi.viewport().height() / self._zoom_factor

    @property
    def zoom_factor(self) -> float:
        return self._zoom_factor

    @zoom_factor.setter
    def zoom_factor(self, value: float) -> None:
        self._zoom_factor = value
        font = self._host.font()
        font.setPointSizeF(self._base_point_size * value)
        self._host.setFont(font)

    # Input ----------------------------------------------------------------
    def consume_shortcut(self, shortcut: KeyboardShortcut) -> bool:
        sequence = shortcut.sequence
        if sequence not in self._shortcuts:
            qt_shortcut = QShortcut(QKeySequence(sequence), self._host)
            qt_shortcut.setContext(Qt.ShortcutContext.ApplicationShortcut)
            qt_shortcut.activated.connect(lambda seq=sequence: self._on_shortcut(seq))
            self._shortcuts[sequence] = qt_shortcut
        if sequence in self._pressed:
            self._pressed.discard(sequence)
            return True
        return False

    def _on_shortcut(self, sequence: str) -> None:
        self._pressed.add(sequence)
        self._request_frame()

    def format_shortcut(self, shortcut: KeyboardShortcut) -> str:
        return QKeySequence(shortcut.sequence).toString(QKeySequence.SequenceFormat.NativeText)

    # Window manager -------------------------------------------------------
    def reset_areas(self) -> None:
        self._organize_pending = True

    def reset_memory(self) -> None:
        self._reset_pending = True

    # Container helpers ----------------------------------------------------
    def _current(self) -> _Container:
        if not self._stack:
            raise RuntimeError("Widget drawn outside of a panel, menu or window")
        return self._stack[-1]

    def _container_for(self, key: str, factory: Callable[[], _Container]) -> _Container:
        container = self._containers.get(key)
        if container is None:
            container = factory()
            self._containers[key] = container
        return container

    @contextmanager
    def _push(self, container: _Container) -> Iterator[None]:
        self._stack.append(container)
        try:
            yield
        finally:
            self._stack.pop()

    def _retain(self, key: ItemKey, factory: Callable[[], Item]) -> Tuple[Item, bool]:
        item = self._items.get(key)
        created = item is None
        if created:
            item = factory()
            self._items[key] = item
        self._touched.add(key)
        return item, created

    def _nested_layout(self, kind: str, make_layout: Callable[[QWidget], QBoxLayout]):
        """Nested layout container (scroll area, centered, right-to-left) inside the current one."""
        parent = self._current()
        if parent.holds_actions:
            return self._push(parent)
        key = parent.next_key(kind)

        def create() -> QWidget:
            if kind == "scroll_area":
                outer = QScrollArea()
                outer.setWidgetResizable(True)
                inner = QWidget()
                make_layout(inner)
                outer.setWidget(inner)
                outer.inner = inner  # type: ignore[attr-defined]
                return outer
            widget = QWidget()
            make_layout(widget).setContentsMargins(0, 0, 0, 0)
            widget.inner = widget  # type: ignore[attr-defined]
            return widget

        widget, _created = self._retain(key, create)
        parent.place(widget)  # type: ignore[arg-type]
        inner = widget.inner  # type: ignore[union-attr]
        container = self._container_for(
            "/".join(map(str, key)), lambda: _LayoutContainer("/".join(map(str, key)), inner.layout())
        )
        return self._push(container)

    # Containers -----------------------------------------------------------
    @contextmanager
    def side_panel(
        self, panel_id: str, *, default_width: float = 150.0, resizable: bool = True
    ) -> Iterator[None]:
        entry = self._docks.get(panel_id)
        if entry is None:
            dock = QDockWidget(self._host)
            dock.setObjectName(panel_id)
            dock.setTitleBarWidget(QWidget())
            body = QWidget()
            layout = QVBoxLayout(body)
            layout.addStretch(1)
            dock.setWidget(body)
            dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
            self._host.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, dock)
            container = _LayoutContainer(f"side:{panel_id}", layout)
            self._containers[container.key] = container
            entry = (dock, container)
            self._docks[panel_id] = entry
        dock, container = entry
        width = int(default_width * self._zoom_factor)
        if resizable:
            dock.setMinimumWidth(width)
            dock.setMaximumWidth(16777215)
        else:
            dock.setFixedWidth(width)
        dock.setVisible(True)
        self._docks_touched.add(panel_id)
        with self._push(container):
            yield

    @contextmanager
    def top_bar(self, panel_id: str) -> Iterator[None]:
        menu_bar = self._host.menuBar()
        menu_bar.setVisible(True)
        container = self._container_for(f"top:{panel_id}", lambda: _MenuContainer(f"top:{panel_id}", menu_bar))
        with self._push(container):
            yield

    @contextmanager
    def menu(self, label: str, *, font_size: Optional[float] = None) -> Iterator[MenuHandle]:
        parent = self._current()
        key = parent.next_key("menu", label)

        def create() -> Item:
            qmenu = QMenu(label)
            if font_size is not None:
                font = qmenu.font()
                font.setPointSizeF(font_size * self._zoom_factor * 0.75)
                qmenu.setFont(font)
            if parent.holds_actions:
                action = qmenu.menuAction()
                action.qmenu = qmenu  # type: ignore[attr-defined]
                return action
            button = QPushButton(label)
            button.setMenu(qmenu)
            button.qmenu = qmenu  # type: ignore[attr-defined]
            return button

        item, _created = self._retain(key, create)
        parent.place(item)  # type: ignore[arg-type]
        qmenu: QMenu = item.qmenu  # type: ignore[union-attr]
        container_key = "/".join(map(str, key))
        container = self._container_for(container_key, lambda: _MenuContainer(container_key, qmenu))
        handle = MenuHandle(label=label, open=True)
        self._menu_handles.append(handle)
        try:
            with self._push(container):
                yield handle
        finally:
            self._menu_handles.pop()
        if handle.close_requested:
            qmenu.hide()

    @contextmanager
    def window(
        self, title: str, *, open: bool = True, options: Optional[WindowOptions] = None
    ) -> Iterator[WindowHandle]:
        options = options or WindowOptions()
        handle = WindowHandle(title=title, open=open)
        if title in self._window_closes:
            self._window_closes.discard(title)
            handle.open = False
        window = self._windows.get(title)
        if window is None:
            window = _SubWindow(title, self._on_window_close)
            self._mdi.addSubWindow(window)
            self._windows[title] = window
            container = _LayoutContainer(f"window:{title}", window.body_layout)
            self._containers[container.key] = container
        self._apply_window_options(window, options)
        self._windows_touched.add(title)
        if handle.open and not window.isVisible():
            window.show()
        elif not handle.open:
            window.hide()
        with self._push(self._containers[f"window:{title}"]):
            yield handle

    def _apply_window_options(self, window: _SubWindow, options: WindowOptions) -> None:
        width = int((options.default_width or _DEFAULT_WINDOW_SIZE[0]) * self._zoom_factor)
        height = int((options.default_height or _DEFAULT_WINDOW_SIZE[1]) * self._zoom_factor)
        if not window.placed:
            window.resize(width, height)
            window.placed = True
        if not options.resizable:
            window.setFixedSize(width, height)
        else:
            window.setMinimumSize(0, 0)
            window.setMaximumSize(16777215, 16777215)
        window.scroll.setVerticalScrollBarPolicy(
            Qt.ScrollBarPolicy.ScrollBarAsNeeded
            if options.vscroll
            else Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        )
        flags = window.windowFlags()
        wanted = flags
        if options.closable:
            wanted |= Qt.WindowType.WindowCloseButtonHint
        else:
            wanted &= ~Qt.WindowType.WindowCloseButtonHint
        if options.collapsible:
            wanted |= Qt.WindowType.WindowMinimizeButtonHint
        else:
            wanted &= ~Qt.WindowType.WindowMinimizeButtonHint
        if wanted != flags:
            window.setWindowFlags(wanted)
        if options.anchor_center:
            viewport = self._mdi.viewport().rect()
            window.move(
                max(0, (viewport.width() - window.width()) // 2),
                max(0, (viewport.height() - window.height()) // 2),
            )

    def _on_window_close(self, title: str) -> None:
        self._window_closes.add(title)
        self._request_frame()

    def scroll_area(self):
        return self._nested_layout("scroll_area", lambda w: QVBoxLayout(w))

    def centered(self):
        def make(widget: QWidget) -> QBoxLayout:
            layout = QVBoxLayout(widget)
            layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)
            return layout

        return self._nested_layout("centered", make)

    def right_to_left(self):
        def make(widget: QWidget) -> QBoxLayout:
            layout = QBoxLayout(QBoxLayout.Direction.RightToLeft, widget)
            layout.setAlignment(Qt.AlignmentFlag.AlignRight)
            return layout

        return self._nested_layout("right_to_left", make)

    # Widgets --------------------------------------------------------------
    def _static_label(self, kind: str, text: str, *, rich: bool = False, style: str = "") -> None:
        container = self._current()
        key = container.next_key(kind)
        if container.holds_actions:
            action, _created = self._retain(key, lambda: QAction(text, container.menu))  # type: ignore[attr-defined]
            action.setText(text)
            action.setEnabled(False)
            container.place(action)  # type: ignore[arg-type]
            return

        def create() -> QWidget:
            label = QLabel()
            label.setWordWrap(True)
            if rich:
                label.setTextFormat(Qt.TextFormat.RichText)
                label.setOpenExternalLinks(True)
            if style:
                label.setStyleSheet(style)
            return label

        label, _created = self._retain(key, create)
        if label.text() != text:
            label.setText(text)
        container.place(label)  # type: ignore[arg-type]

    def heading(self, text: str) -> None:
        self._static_label("heading", text, style="font-weight: bold; font-size: 120%;")

    def label(self, text: str) -> None:
        self._static_label("label", text)

    def separator(self) -> None:
        container = self._current()
        key = container.next_key("separator")
        if container.holds_actions:

            def create_action() -> QAction:
                action = QAction(container.menu)  # type: ignore[attr-defined]
                action.setSeparator(True)
                return action

            action, _created = self._retain(key, create_action)
            container.place(action)  # type: ignore[arg-type]
            return

        def create() -> QWidget:
            line = QFrame()
            line.setFrameShape(QFrame.Shape.HLine)
            line.setFrameShadow(QFrame.Shadow.Sunken)
            return line

        line, _created = self._retain(key, create)
        container.place(line)  # type: ignore[arg-type]

    def add_space(self, amount: float) -> None:
        container = self._current()
        if container.holds_actions:
            return
        key = container.next_key("space")
        spacer, _created = self._retain(key, QWidget)
        spacer.setFixedHeight(int(amount * self._zoom_factor))
        container.place(spacer)  # type: ignore[arg-type]

    def hyperlink(self, text: str, url: str) -> None:
        container = self._current()
        if container.holds_actions:
            key = container.next_key("hyperlink", text)

            def create() -> QAction:
                action = QAction(text, container.menu)  # type: ignore[attr-defined]
                action.triggered.connect(lambda _checked=False, u=url: QDesktopServices.openUrl(QUrl(u)))
                return action

            action, _created = self._retain(key, create)
            container.place(action)  # type: ignore[arg-type]
            return
        self._static_label("hyperlink", f'<a href="{url}">{text}</a>', rich=True)

    def toggle_value(self, selected: bool, text: str) -> bool:
        container = self._current()
        key = container.next_key("toggle", text)
        if container.holds_actions:

            def create_action() -> QAction:
                action = QAction(text, container.menu)  # type: ignore[attr-defined]
                action.setCheckable(True)
                action.triggered.connect(lambda checked, k=key: self._input(k, checked))
                return action

            item, _created = self._retain(key, create_action)
        else:

            def create() -> QWidget:
                button = QToolButton()
                button.setText(text)
                button.setCheckable(True)
                button.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
                button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
                button.clicked.connect(lambda checked, k=key: self._input(k, checked))
                return button

            item, _created = self._retain(key, create)
        if key in self._pending:
            selected = bool(self._pending.pop(key))
            self._mark_menu_click()
        item.blockSignals(True)
        item.setChecked(selected)
        item.blockSignals(False)
        container.place(item)  # type: ignore[arg-type]
        return selected

    def _mark_menu_click(self) -> None:
        if self._menu_handles:
            self._menu_handles[-1].clicked_inside = True

    def button(
        self,
        text: str,
        *,
        shortcut_text: Optional[str] = None,
        tooltip: Optional[str] = None,
        font_size: Optional[float] = None,
        enabled: bool = True,
    ) -> bool:
        container = self._current()
        key = container.next_key("button", text)
        if container.holds_actions:

            def create_action() -> QAction:
                action = QAction(container.menu)  # type: ignore[attr-defined]
                action.triggered.connect(lambda _checked=False, k=key: self._input(k, True))
                return action

            item, _created = self._retain(key, create_action)
            item.setText(f"{text}\t{shortcut_text}" if shortcut_text else text)
        else:

            def create() -> QWidget:
                button = QPushButton(text)
                button.clicked.connect(lambda _checked=False, k=key: self._input(k, True))
                if font_size is not None:
                    font = button.font()
                    font.setPointSizeF(font_size * 0.75)
                    button.setFont(font)
                return button

            item, _created = self._retain(key, create)
        if tooltip:
            item.setToolTip(tooltip)
        item.setEnabled(enabled)
        container.place(item)  # type: ignore[arg-type]
        clicked = bool(self._pending.pop(key, False)) and enabled
        if clicked:
            self._mark_menu_click()
        return clicked

    def checkbox(self, checked: bool, text: str) -> bool:
        container = self._current()
        if container.holds_actions:
            return self.toggle_value(checked, text)
        key = container.next_key("checkbox", text)

        def create() -> QWidget:
            box = QCheckBox(text)
            box.clicked.connect(lambda value, k=key: self._input(k, value))
            return box

        box, _created = self._retain(key, create)
        if key in self._pending:
            checked = bool(self._pending.pop(key))
        box.blockSignals(True)
        box.setChecked(checked)
        box.blockSignals(False)
        container.place(box)  # type: ignore[arg-type]
        return checked

    def slider(self, value: float, minimum: float, maximum: float, text: str) -> float:
        container = self._current()
        if container.holds_actions:
            return value
        key = container.next_key("slider", text)

        def create() -> QWidget:
            row = _SliderRow(text)
            row.slider.valueChanged.connect(
                lambda position, k=key, r=row: self._input(k, r.to_value(position))
            )
            return row

        row, _created = self._retain(key, create)
        if key in self._pending:
            value = float(self._pending.pop(key))
        value = min(max(value, minimum), maximum)
        row.show_value(value, minimum, maximum)  # type: ignore[union-attr]
        container.place(row)  # type: ignore[arg-type]
        return value

    def text_edit(self, text: str, *, key: str, multiline: bool = False) -> str:
        container = self._current()
        if container.holds_actions:
            return text
        item_key = container.next_key("text_edit", key)

        def create() -> QWidget:
            if multiline:
                editor = QPlainTextEdit()
                editor.textChanged.connect(
                    lambda k=item_key, e=editor: self._input(k, e.toPlainText())
                )
            else:
                editor = QLineEdit()
                editor.textEdited.connect(lambda value, k=item_key: self._input(k, value))
            return editor

        editor, _created = self._retain(item_key, create)
        if item_key in self._pending:
            text = self._pending.pop(item_key)
        current = editor.toPlainText() if multiline else editor.text()  # type: ignore[union-attr]
        if current != text:
            editor.blockSignals(True)
            if multiline:
                editor.setPlainText(text)  # type: ignore[union-attr]
            else:
                editor.setText(text)  # type: ignore[union-attr]
            editor.blockSignals(False)
        container.place(editor)  # type: ignore[arg-type]
        return text
