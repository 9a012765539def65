#Pygame visualization for a generated maze and the BFS search through it

from __future__ import annotations

import pygame

from maze_solver import SolverVisualizer
from render import MarkerKind, project


class MazeVisualizer:
    #Draws the renderable projection of a maze and animates the solver on top of it

    def __init__(
        self,
        maze,
        grid,
        solver: SolverVisualizer,
        tile_size=24,
        stats_height=120,
        title_suffix="",
        fps=10,
    ):
        self.maze = maze
        self.grid = grid
        self.solver = solver
        self.tile_size = tile_size
        self.stats_height = stats_height
        self.title_suffix = title_suffix
        self.fps = fps
        self.renderable = project(maze, grid)
        self.bounds = self.renderable.bounds()

    def _compute_layout(self, container_w, container_h):
        min_x, min_y, max_x, max_y = self.bounds
        span_w = max(1.0, max_x - min_x)
        span_h = max(1.0, max_y - min_y)

        usable_w = max(320, container_w - 16)
        usable_h = max(240, container_h - 16 - self.stats_height)

        tile_size = max(4, int(min(usable_w / span_w, usable_h / span_h)))
        line_height = max(16, int(18 * min(tile_size, self.tile_size * 2) / 24))
        return tile_size, line_height

    def _to_screen(self, point, tile_size):
        min_x, min_y, _, _ = self.bounds
        return (
            8 + int((point[0] - min_x) * tile_size),
            8 + int((point[1] - min_y) * tile_size),
        )

    def run(self):
        pygame.init()
        display_info = pygame.display.Info()
        default_w = max(640, int(display_info.current_w * 0.6))
        default_h = max(480, int(display_info.current_h * 0.8))
        screen = pygame.display.set_mode((default_w, default_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Spanning-tree Maze{self.title_suffix}")
        tile_size, line_height = self._compute_layout(*screen.get_size())
        font = pygame.font.SysFont(None, line_height)
        clock = pygame.time.Clock()
        fullscreen = False
        last_window_size = screen.get_size()

        #color schemes for visual aspects
        colors = {
            "wall": (20, 20, 20),
            "floor": (230, 230, 230),
            MarkerKind.ENTRANCE: (50, 200, 90),
            MarkerKind.EXIT: (210, 60, 60),
            MarkerKind.SOLUTION: (255, 215, 0),
            MarkerKind.NORMAL: (180, 180, 180),
        }

        running = True
        while running:
            #Raise fps to have the search animate faster
            clock.tick(self.fps)
            tile_size, new_line_height = self._compute_layout(*screen.get_size())
            if new_line_height != line_height:
                line_height = new_line_height
                font = pygame.font.SysFont(None, line_height)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                if event.type == pygame.VIDEORESIZE and not fullscreen:
                    last_window_size = (event.w, event.h)
                    screen = pygame.display.set_mode(last_window_size, pygame.RESIZABLE)
                if event.type == pygame.KEYDOWN and event.key == pygame.K_f:
                    fullscreen = not fullscreen
                    if fullscreen:
                        display_info = pygame.display.Info()
                        screen = pygame.display.set_mode((display_info.current_w, display_info.current_h), pygame.FULLSCREEN)
                    else:
                        screen = pygame.display.set_mode(last_window_size, pygame.RESIZABLE)

            self.solver.advance()
            snapshot = self.solver.snapshot

            screen.fill(colors["floor"])
            radius = max(2, tile_size // 5)

            for cell in snapshot.visited:
                center = self._to_screen(self.grid.position(cell), tile_size)
                pygame.draw.circle(screen, self.solver.color, center, radius + 2, 1)

            for cell in snapshot.frontier:
                center = self._to_screen(self.grid.position(cell), tile_size)
                pygame.draw.circle(screen, self.solver.color, center, radius)

            if len(snapshot.path) > 1:
                points = [self._to_screen(self.grid.position(cell), tile_size) for cell in snapshot.path]
                pygame.draw.lines(screen, self.solver.color, False, points, max(2, tile_size // 6))

            for wall in self.renderable.walls:
                pygame.draw.line(
                    screen,
                    colors["wall"],
                    self._to_screen(wall.start, tile_size),
                    self._to_screen(wall.end, tile_size),
                    max(1, tile_size // 10),
                )

            for marker in self.renderable.markers:
                if marker.kind is MarkerKind.NORMAL:
                    continue
                center = self._to_screen(marker.position, tile_size)
                pygame.draw.circle(screen, colors[marker.kind], center, radius)

            path_len = len(snapshot.path) if snapshot.path else "-"
            lines = [
                f"{self.solver.name}",
                f"success: {snapshot.success}",
                f"expanded: {snapshot.expanded}",
                f"path length: {path_len}",
            ]
            pad = 6
            _, _, max_x, max_y = self.bounds
            _, bottom = self._to_screen((max_x, max_y), tile_size)
            stats_rect = pygame.Rect(0, bottom + pad, screen.get_width(), line_height * len(lines) + pad * 2)
            pygame.draw.rect(screen, (25, 25, 25), stats_rect)

            for i, text in enumerate(lines):
                surface = font.render(text, True, (235, 235, 235))
                screen.blit(surface, (stats_rect.x + pad, stats_rect.y + pad + i * line_height))

            pygame.display.flip()

        pygame.quit()
