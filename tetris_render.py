"""
Rendering helpers for the Tetris driver.

Draws a Snapshot; never touches the engine.
- Pre-render block cell Surfaces per kind (solid + ghost outline).
- Pre-render the static background (grid + panel frame + preview frame).
- Cache a BOARD SURFACE with the locked blocks; rebuild it only when the
  snapshot's board differs from the one last drawn.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_game import Snapshot
from tetris_layout import Dims, cell_origin
from tetris_piece import COLORS, SHAPES

BG = (10,13,34)
GRID = (40,50,90)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    high: int = -1
    level: int = -1
    lines: int = -1
    next_type: str = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 174
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g

    # ---------- Board surface cache ----------
    def _sync_board(self, board):
        if board == self._board_key:
            return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c + 1, y*c + 1))
        self._board_key = board

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self._sync_board(snap.board)
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if snap.piece_kind and not snap.waiting:
            for x, y in snap.ghost_cells:
                if y >= 0:
                    ox, oy = cell_origin(d, x, y)
                    screen.blit(self.ghost_surf[snap.piece_kind], (ox + 4, oy + 4))
            for x, y in snap.piece_cells:
                if y >= 0:
                    ox, oy = cell_origin(d, x, y)
                    screen.blit(self.cell_surf[snap.piece_kind], (ox + 1, oy + 1))
        self.draw_panel_hud(screen, snap)
        if snap.waiting:
            self._banner(screen, "TETRIS", f"High score {snap.high_score} • any key to start", (200,235,255))
        elif snap.over:
            self._banner(screen, "GAME OVER", "R restart  Q quit", (255,220,220))
        elif snap.paused:
            self._banner(screen, "PAUSED", "P to resume", (220,240,255))

    def _banner(self, screen: pygame.Surface, title: str, hint: str, color):
        d = self.dims
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        shade = pygame.Surface((d.board_w, 90), pygame.SRCALPHA)
        shade.fill((20,25,40,220))
        screen.blit(shade, (d.board_x, cy - 45))
        msg = self.big_font.render(title, True, color)
        screen.blit(msg, msg.get_rect(center=(cx, cy - 12)))
        sub = self.font.render(hint, True, DIM_TEXT)
        screen.blit(sub, sub.get_rect(center=(cx, cy + 22)))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.high_score != self.hud.high:
            self.hud.high = snap.high_score
            self.hud.high_s = f.render(f"High: {snap.high_score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.next_kind != self.hud.next_type:
            self.hud.next_type = snap.next_kind
            self.hud.next_label = self._preview(snap.next_kind)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        y = d.panel_y + 44
        for s in (self.hud.score_s, self.hud.high_s, self.hud.level_s, self.hud.lines_s):
            if s: screen.blit(s, (d.panel_x + 12, y))
            y += 24
        nl = f.render("Next:", True, TEXT)
        screen.blit(nl, (d.panel_x + 12, d.panel_y + 150))
        if self.hud.next_label:
            screen.blit(self.hud.next_label, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ A/D Move", True, DIM_TEXT),
                f.render("↑ W Rotate", True, DIM_TEXT),
                f.render("↓ S Soft drop", True, DIM_TEXT),
                f.render("Space Hard drop", True, DIM_TEXT),
                f.render("P Pause • R Restart", True, DIM_TEXT),
                f.render("Q/Esc Quit", True, DIM_TEXT),
            ]
        y = d.panel_y + 270
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def _preview(self, kind: str) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        shape = SHAPES[kind]
        offx = (4 - len(shape[0])) // 2
        offy = max(0, (4 - len(shape)) // 2)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
                    block.fill(COLORS[kind])
                    s.blit(block, ((x + offx) * self.pv_cell + 1, (y + offy) * self.pv_cell + 1))
        return s
