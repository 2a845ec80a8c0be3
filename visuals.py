"""Visual rendering system."""

from __future__ import annotations

import math

import pyglet
from pyglet import shapes

from config import PALETTE
from hud import HUD, NotificationBanner, TextScreen
from player import ship_outline


class RenderHandle:
    """Shapes drawn for one entity."""

    def __init__(self, owner, *objs):
        self.owner = owner
        self.objs = list(objs)

    def delete(self):
        for o in self.objs:
            if hasattr(o, "delete"):
                o.delete()


class Visuals:
    """Vector-style renderer.

    Simulation coordinates have y growing downwards; everything is flipped
    into pyglet's bottom-left origin here and nowhere else.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.batch = pyglet.graphics.Batch()
        self._handles: dict[int, RenderHandle] = {}
        self.hud = HUD(width, height)
        self.screen = TextScreen(width, height)
        self.notifications = NotificationBanner(width, height)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.hud.resize(width, height)
        self.screen.resize(width, height)
        self.notifications.resize(width, height)

    def _flip(self, x: float, y: float) -> tuple[float, float]:
        return x, self.height - y

    # ------------------------------------------------------------------
    # Entity handles
    # ------------------------------------------------------------------

    def _outline(self, owner, count: int, color) -> RenderHandle:
        lines = [shapes.Line(0, 0, 0, 0, thickness=1.5, color=color, batch=self.batch) for _ in range(count)]
        return RenderHandle(owner, *lines)

    def _ensure(self, entity, factory) -> RenderHandle:
        h = self._handles.get(id(entity))
        if h is None or h.owner is not entity:
            if h is not None:
                h.delete()
            h = factory(entity)
            self._handles[id(entity)] = h
        return h

    def _set_outline(self, lines, points) -> None:
        n = len(points)
        for i, line in enumerate(lines):
            x1, y1 = self._flip(*points[i])
            x2, y2 = self._flip(*points[(i + 1) % n])
            line.x, line.y = x1, y1
            line.x2, line.y2 = x2, y2

    def _make_ship(self, ship) -> RenderHandle:
        h = self._outline(ship, 3, PALETTE["ship"])
        flame = shapes.Line(0, 0, 0, 0, thickness=1.5, color=PALETTE["thrust"], batch=self.batch)
        h.objs.append(flame)
        return h

    def sync_ship(self, ship) -> None:
        h = self._ensure(ship, self._make_ship)
        *hull, flame = h.objs
        visible = ship.visible
        for line in hull:
            line.visible = visible
        self._set_outline(hull, ship_outline(ship))

        flame.visible = visible and ship.thrusting
        if flame.visible:
            back = ship.rotation + math.pi
            bx = ship.pos.x + math.cos(back) * ship.radius * 0.6
            by = ship.pos.y + math.sin(back) * ship.radius * 0.6
            tx = ship.pos.x + math.cos(back) * ship.radius * 1.4
            ty = ship.pos.y + math.sin(back) * ship.radius * 1.4
            flame.x, flame.y = self._flip(bx, by)
            flame.x2, flame.y2 = self._flip(tx, ty)

    def sync_asteroid(self, asteroid) -> None:
        h = self._ensure(asteroid, lambda a: self._outline(a, len(a.shape), PALETTE["asteroid"]))
        cos_r = math.cos(asteroid.rotation)
        sin_r = math.sin(asteroid.rotation)
        points = [
            (asteroid.pos.x + px * cos_r - py * sin_r, asteroid.pos.y + px * sin_r + py * cos_r)
            for px, py in asteroid.shape
        ]
        self._set_outline(h.objs, points)

    def sync_saucer(self, saucer) -> None:
        h = self._ensure(saucer, lambda s: self._outline(s, 6, PALETTE["saucer"]))
        r = saucer.radius
        x, y = saucer.pos.x, saucer.pos.y
        points = [
            (x - r, y),
            (x - r * 0.5, y - r * 0.5),
            (x + r * 0.5, y - r * 0.5),
            (x + r, y),
            (x + r * 0.5, y + r * 0.4),
            (x - r * 0.5, y + r * 0.4),
        ]
        self._set_outline(h.objs, points)

    def sync_projectile(self, proj) -> None:
        def make(p):
            color = PALETTE["player_projectile"] if p.is_player else PALETTE["enemy_projectile"]
            return RenderHandle(p, shapes.Circle(0, 0, max(1.5, p.radius), color=color, batch=self.batch))

        h = self._ensure(proj, make)
        h.objs[0].x, h.objs[0].y = self._flip(proj.pos.x, proj.pos.y)

    def _drop_stale(self, live_ids: set[int]) -> None:
        for key in [k for k in self._handles if k not in live_ids]:
            self._handles.pop(key).delete()

    # ------------------------------------------------------------------
    # Renderer interface used by the states
    # ------------------------------------------------------------------

    def draw_world(self, state) -> None:
        live: set[int] = set()
        if state.ship is not None and state.ship.alive:
            self.sync_ship(state.ship)
            live.add(id(state.ship))
        for a in state.asteroids:
            if a.alive:
                self.sync_asteroid(a)
                live.add(id(a))
        for s in state.saucers:
            if s.alive:
                self.sync_saucer(s)
                live.add(id(s))
        for p in state.projectiles:
            if p.alive:
                self.sync_projectile(p)
                live.add(id(p))
        self._drop_stale(live)
        self.batch.draw()

    def draw_hud(self, state, user, muted: bool) -> None:
        self.hud.update(state, user, muted)
        self.hud.draw()

    def draw_menu(self, title: str, options, index: int, subtitle: str | None = None,
                  active: str | None = None, overlay: bool = False) -> None:
        rows: list[tuple[str, str]] = []
        if subtitle:
            rows += [(subtitle, "locked"), ("", "locked")]
        for i, option in enumerate(options):
            if i == index:
                rows.append((f"> {option} <", "menu_selected"))
            elif option == active:
                rows.append((option, "menu_active"))
            else:
                rows.append((option, "menu_text"))
        self.screen.show(title, rows, footer="Up/Down: move   Enter/Space: select   M: mute", overlay=overlay)
        self.screen.draw()

    def draw_list(self, title: str, rows, footer: str = "") -> None:
        self._drop_stale(set())
        self.screen.show(title, list(rows), footer=footer)
        self.screen.draw()

    def draw_notifications(self, achievements) -> None:
        self.notifications.draw(achievements)
