import logging
import random
import sys
from typing import List, Optional, Tuple

from PyQt5.QtWidgets import (QApplication, QMainWindow, QGraphicsView, QGraphicsScene,
                            QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                            QCheckBox, QSlider, QRadioButton, QButtonGroup,
                            QSplitter, QGroupBox, QTextEdit, QSpinBox)
from PyQt5.QtGui import (QPen, QBrush, QColor, QPainter, QFont, QPolygonF, QPalette)
from PyQt5.QtCore import Qt, QPointF, QRectF

from geometry import EPSILON, Point, locate_point, polygon_area, polygon_perimeter
from hull import (InvalidArgumentError, convex_hull, divide_and_conquer,
                  find_tangents, preprocess)
from oracles import graham_scan

logger = logging.getLogger(__name__)

Segment = Tuple[Point, Point]


class HullGraphicsScene(QGraphicsScene):
    """Scene with a grid background and the hull drawing palette"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setBackgroundBrush(QColor(25, 25, 35))

        # Grid properties
        self.grid_visible = True
        self.grid_size = 40
        self.grid_color = QColor(45, 45, 55)
        self.grid_major_color = QColor(60, 60, 70)

        self.hull_brush = QBrush(QColor(50, 100, 240, 50))
        self.hull_pen = QPen(QColor(65, 130, 255), 2)
        self.hull_pen.setCosmetic(True)

        self.half_pens = (QPen(QColor(240, 170, 40), 1.5, Qt.DashLine),
                          QPen(QColor(200, 90, 220), 1.5, Qt.DashLine))
        self.tangent_pen = QPen(QColor(40, 200, 90), 2.5)
        for pen in self.half_pens + (self.tangent_pen,):
            pen.setCosmetic(True)

        self.point_brush = QBrush(QColor(200, 205, 215))
        self.vertex_brush = QBrush(QColor(65, 130, 255))
        self.probe_pen = QPen(QColor(220, 38, 38), 2.5)
        self.probe_pen.setCosmetic(True)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Grid lines, every fifth one brighter"""
        super().drawBackground(painter, rect)
        if not self.grid_visible:
            return

        step = self.grid_size
        minor, major = QPen(self.grid_color, 1), QPen(self.grid_major_color, 1)
        x0, x1 = int(rect.left()) // step, int(rect.right()) // step + 1
        y0, y1 = int(rect.top()) // step, int(rect.bottom()) // step + 1
        for k in range(x0, x1):
            painter.setPen(major if k % 5 == 0 else minor)
            painter.drawLine(k * step, y0 * step, k * step, y1 * step)
        for k in range(y0, y1):
            painter.setPen(major if k % 5 == 0 else minor)
            painter.drawLine(x0 * step, k * step, x1 * step, k * step)


class HullExplorerApp(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Hull Explorer")
        self.resize(1200, 700)

        # Data structures
        self.points: List[Point] = []
        self.hull: List[Point] = []
        self.half_hulls: Tuple[List[Point], List[Point]] = ([], [])
        self.tangents: List[Segment] = []
        self.probe: Optional[Point] = None
        self.error: Optional[str] = None
        self.oracle_agrees: Optional[bool] = None

        # Settings
        self.mode = "point"  # "point", "probe"
        self.eps = EPSILON
        self.show_merge = True
        self._rng = random.Random()

        self._init_ui()
        self._connect_signals()
        self._apply_palette()
        self._refresh_info()

    def _init_ui(self):
        """Build the view and the control panel"""
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        main_layout = QHBoxLayout(self.central_widget)

        self.splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(self.splitter)

        # Left side: Graphics view
        self.view_container = QWidget()
        view_layout = QVBoxLayout(self.view_container)
        view_layout.setContentsMargins(0, 0, 0, 0)

        self.scene = HullGraphicsScene()
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing)
        self.view.setDragMode(QGraphicsView.NoDrag)
        self.view.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

        view_layout.addWidget(self.view)
        self.splitter.addWidget(self.view_container)

        # Right side: Controls panel
        self.panel = QWidget()
        self.panel.setMinimumWidth(300)
        self.panel.setMaximumWidth(450)
        panel_layout = QVBoxLayout(self.panel)

        title_label = QLabel("Hull Explorer")
        title_label.setFont(QFont("Arial", 16, QFont.Bold))
        title_label.setAlignment(Qt.AlignCenter)
        panel_layout.addWidget(title_label)

        mode_group = QGroupBox("Mode")
        mode_layout = QVBoxLayout(mode_group)

        self.mode_buttons = QButtonGroup(self)
        self.point_radio = QRadioButton("Add point")
        self.point_radio.setChecked(True)
        self.probe_radio = QRadioButton("Probe point")
        self.mode_buttons.addButton(self.point_radio)
        self.mode_buttons.addButton(self.probe_radio)
        mode_layout.addWidget(self.point_radio)
        mode_layout.addWidget(self.probe_radio)
        panel_layout.addWidget(mode_group)

        buttons_layout = QHBoxLayout()
        self.random_btn = QPushButton("Random Cloud")
        self.count_spin = QSpinBox()
        self.count_spin.setRange(3, 5000)
        self.count_spin.setValue(100)
        self.clear_btn = QPushButton("Clear")
        buttons_layout.addWidget(self.random_btn)
        buttons_layout.addWidget(self.count_spin)
        buttons_layout.addWidget(self.clear_btn)
        panel_layout.addLayout(buttons_layout)

        options_group = QGroupBox("Options")
        options_layout = QVBoxLayout(options_group)

        # Tolerance, as a power of ten
        tolerance_layout = QHBoxLayout()
        tolerance_layout.addWidget(QLabel("Tolerance:"))
        self.tolerance_slider = QSlider(Qt.Horizontal)
        self.tolerance_slider.setMinimum(-12)
        self.tolerance_slider.setMaximum(-3)
        self.tolerance_slider.setValue(-9)
        self.tolerance_slider.setSingleStep(1)
        tolerance_layout.addWidget(self.tolerance_slider)
        self.tolerance_value = QLabel(f"{self.eps:.0e}")
        tolerance_layout.addWidget(self.tolerance_value)
        options_layout.addLayout(tolerance_layout)

        self.show_grid = QCheckBox("Show grid")
        self.show_grid.setChecked(True)
        options_layout.addWidget(self.show_grid)

        self.show_merge_box = QCheckBox("Show last merge tangents")
        self.show_merge_box.setChecked(True)
        options_layout.addWidget(self.show_merge_box)

        hotkeys_label = QLabel("Hotkeys: R=Random cloud, C=Clear")
        hotkeys_label.setStyleSheet("color: gray;")
        options_layout.addWidget(hotkeys_label)
        panel_layout.addWidget(options_group)

        info_group = QGroupBox("Information")
        info_layout = QVBoxLayout(info_group)
        self.info_text = QTextEdit()
        self.info_text.setReadOnly(True)
        self.info_text.setMinimumHeight(200)
        info_layout.addWidget(self.info_text)
        panel_layout.addWidget(info_group)

        self.status_label = QLabel("Add at least 3 points")
        self.status_label.setStyleSheet("color: gray; font-weight: bold;")
        panel_layout.addWidget(self.status_label)

        self.splitter.addWidget(self.panel)
        self.splitter.setSizes([800, 400])

        self.scene.setSceneRect(0, 0, 800, 600)
        self._redraw()

    def _connect_signals(self):
        """Connect UI signals to slots"""
        self.point_radio.toggled.connect(lambda: self._set_mode("point"))
        self.probe_radio.toggled.connect(lambda: self._set_mode("probe"))

        self.random_btn.clicked.connect(self._random_cloud)
        self.clear_btn.clicked.connect(self._clear_all)

        self.tolerance_slider.valueChanged.connect(self._update_tolerance)
        self.show_grid.stateChanged.connect(self._toggle_grid)
        self.show_merge_box.stateChanged.connect(self._toggle_merge)

        self.view.mousePressEvent = self._handle_view_click

    def _set_mode(self, mode):
        self.mode = mode

    def _update_tolerance(self, value):
        """Recompute the hull with tolerance 10**value"""
        self.eps = 10.0 ** value
        self.tolerance_value.setText(f"{self.eps:.0e}")
        self._recompute_hull()
        self._redraw()
        self._refresh_info()

    def _toggle_grid(self, state):
        self.scene.grid_visible = (state == Qt.Checked)
        self.view.viewport().update()

    def _toggle_merge(self, state):
        self.show_merge = (state == Qt.Checked)
        self._redraw()

    def _apply_palette(self):
        """Dark window palette matching the scene"""
        app = QApplication.instance()
        palette = app.palette()
        for role, color in (
            (QPalette.Window, QColor(53, 53, 53)),
            (QPalette.Base, QColor(25, 25, 25)),
            (QPalette.Button, QColor(53, 53, 53)),
            (QPalette.Highlight, QColor(42, 130, 218)),
        ):
            palette.setColor(role, color)
        for role in (QPalette.WindowText, QPalette.Text, QPalette.ButtonText):
            palette.setColor(role, Qt.white)
        app.setPalette(palette)

    def _handle_view_click(self, event):
        """Add or probe a point at the clicked scene position"""
        scene_pos = self.view.mapToScene(event.pos())
        pt = Point(scene_pos.x(), scene_pos.y())

        if self.mode == "point":
            self.points.append(pt)
            self._recompute_hull()
        else:
            self.probe = pt

        self._redraw()
        self._refresh_info()
        super(QGraphicsView, self.view).mousePressEvent(event)

    def _random_cloud(self):
        """Replace the points with a uniform random cloud inside the scene"""
        rect = self.scene.sceneRect().adjusted(40, 40, -40, -40)
        self.points = [
            Point(self._rng.uniform(rect.left(), rect.right()),
                  self._rng.uniform(rect.top(), rect.bottom()))
            for _ in range(self.count_spin.value())
        ]
        self.probe = None
        self._recompute_hull()
        self._redraw()
        self._refresh_info()

    def _clear_all(self):
        self.points.clear()
        self.probe = None
        self._recompute_hull()
        self._redraw()
        self._refresh_info()

    def _recompute_hull(self):
        """Rebuild the hull, the top-level merge overlay and the oracle check"""
        self.hull = []
        self.half_hulls = ([], [])
        self.tangents = []
        self.oracle_agrees = None
        self.error = None

        if not self.points:
            return
        try:
            self.hull = convex_hull(self.points, self.eps)
        except InvalidArgumentError as exc:
            logger.warning("hull rejected: %s", exc)
            self.error = str(exc)
            return

        unique = preprocess(self.points, self.eps)
        if len(unique) > 3:
            mid = len(unique) // 2
            left = divide_and_conquer(unique[:mid], self.eps)
            right = divide_and_conquer(unique[mid:], self.eps)
            upper, lower = find_tangents(left, right, self.eps)
            self.half_hulls = (left, right)
            self.tangents = [upper, lower]

        self.oracle_agrees = set(self.hull) == set(graham_scan(unique, self.eps))
        if not self.oracle_agrees:
            logger.warning("divide-and-conquer and graham scan disagree on %d points", len(unique))
        logger.info("hull of %d points has %d vertices", len(self.points), len(self.hull))

    def _redraw(self):
        """Redraw the entire scene"""
        self.scene.clear()

        if len(self.hull) >= 3:
            hull_item = self.scene.addPolygon(self._polygon(self.hull), self.scene.hull_pen, self.scene.hull_brush)
            hull_item.setZValue(10)
        elif len(self.hull) == 2:
            p1, p2 = self.hull
            self.scene.addLine(p1[0], p1[1], p2[0], p2[1], self.scene.hull_pen).setZValue(10)

        if self.show_merge:
            for half, pen in zip(self.half_hulls, self.scene.half_pens):
                if len(half) >= 3:
                    self.scene.addPolygon(self._polygon(half), pen, QBrush(Qt.NoBrush)).setZValue(15)
                elif len(half) == 2:
                    (x1, y1), (x2, y2) = half
                    self.scene.addLine(x1, y1, x2, y2, pen).setZValue(15)
            for (x1, y1), (x2, y2) in self.tangents:
                self.scene.addLine(x1, y1, x2, y2, self.scene.tangent_pen).setZValue(16)

        vertices = set(self.hull)
        for x, y in self.points:
            brush = self.scene.vertex_brush if (x, y) in vertices else self.scene.point_brush
            self.scene.addEllipse(x - 4, y - 4, 8, 8, QPen(Qt.NoPen), brush).setZValue(20)

        if self.probe is not None:
            x, y = self.probe
            self.scene.addEllipse(x - 7, y - 7, 14, 14, self.scene.probe_pen, QBrush(Qt.NoBrush)).setZValue(40)

    def _refresh_info(self):
        """Update info panel with current state"""
        distinct = len(preprocess(self.points, self.eps)) if self.points else 0
        lines = [
            f"<b>Points:</b> {len(self.points)} ({distinct} distinct)",
            f"<b>Hull vertices:</b> {len(self.hull)}",
            f"<b>Area:</b> {polygon_area(self.hull):.1f}",
            f"<b>Perimeter:</b> {polygon_perimeter(self.hull):.1f}",
            f"<b>Tolerance:</b> {self.eps:.0e}",
            f"<b>Probe:</b> {self._fmt(self.probe)} {self._probe_str()}",
            "",
            "<b>Hull:</b>",
        ]
        if self.hull:
            lines.extend(f"• {self._fmt(p)}" for p in self.hull)
        else:
            lines.append("• None")
        self.info_text.setHtml("<p>" + "<br>".join(lines) + "</p>")

        if self.error:
            self.status_label.setText(self.error)
            self.status_label.setStyleSheet("color: red; font-weight: bold;")
        elif self.oracle_agrees is None:
            self.status_label.setText("Add at least 3 points")
            self.status_label.setStyleSheet("color: gray; font-weight: bold;")
        elif self.oracle_agrees:
            self.status_label.setText("Graham scan agrees")
            self.status_label.setStyleSheet("color: green; font-weight: bold;")
        else:
            self.status_label.setText("Graham scan disagrees")
            self.status_label.setStyleSheet("color: red; font-weight: bold;")

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_R:
            self._random_cloud()
        elif event.key() == Qt.Key_C:
            self._clear_all()
        else:
            super().keyPressEvent(event)

    def _probe_str(self) -> str:
        if self.probe is None:
            return ""
        state = locate_point(self.hull, self.probe, max(self.eps, 1e-6))
        return f"({state})" if state is not None else "—"

    @staticmethod
    def _polygon(points: List[Point]) -> QPolygonF:
        polygon = QPolygonF()
        for x, y in points:
            polygon.append(QPointF(x, y))
        return polygon

    @staticmethod
    def _fmt(pt: Optional[Point]) -> str:
        """Format point coordinates"""
        return f"({pt[0]:.1f}, {pt[1]:.1f})" if pt else "—"


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = HullExplorerApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
