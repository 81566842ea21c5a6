"""
renderer.py: pygame drawing of a RenderModel. Pure presentation, no game logic.
"""

import pygame

from .data_models import Mode, PipeView, RenderModel

SKY_TOP = (78, 192, 202)
SKY_BOTTOM = (113, 200, 212)
GROUND_COLOR = (222, 216, 149)
GROUND_DARK = (218, 208, 133)
GRASS = (168, 194, 86)
PIPE_COLOR = (115, 191, 46)
PIPE_DARK = (90, 158, 31)
PIPE_LIP = (138, 216, 65)
BIRD_BODY = (245, 200, 66)
BIRD_WING = (232, 160, 40)
BIRD_EYE = (255, 255, 255)
BIRD_PUPIL = (0, 0, 0)
BIRD_BEAK = (232, 69, 69)
WHITE = (255, 255, 255)
PANEL = (0, 0, 0, 140)

# (x, y, w, h) of the parallax clouds
CLOUDS = [(80, 80, 100, 30), (300, 120, 80, 24), (500, 60, 120, 32), (200, 200, 90, 26)]

LIP_W = 8
LIP_H = 26
RESTART_SIZE = (180, 50)


def restart_button_rect(viewport) -> pygame.Rect:
    """Where the restart button sits on the game-over panel."""
    width, height = viewport
    rect = pygame.Rect((0, 0), RESTART_SIZE)
    rect.center = (int(width // 2), int(height // 2 + 70))
    return rect


class Renderer:
    """Draws onto `screen`. Call as a function with a RenderModel each frame."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 32)

    def __call__(self, model: RenderModel) -> None:
        self.draw(model)

    def draw(self, model: RenderModel) -> None:
        self._draw_background(model)
        for pipe in model.pipes:
            self._draw_pipe(model, pipe)
        self._draw_ground(model)
        self._draw_bird(model)
        self._draw_hud(model)
        pygame.display.flip()

    def _draw_background(self, model: RenderModel):
        width, height = model.viewport
        sky_h = int(height - model.ground_height)
        for y in range(max(sky_h, 0)):
            t = y / max(sky_h - 1, 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.line(self.screen, color, (0, y), (width, y))

        clouds = pygame.Surface((int(width), max(sky_h, 1)), pygame.SRCALPHA)
        for cx, cy, cw, ch in CLOUDS:
            x = ((cx - model.bg_offset * 2) % (width + 200)) - 50
            pygame.draw.ellipse(clouds, (255, 255, 255, 102), (x - cw / 2, cy - ch / 2, cw, ch))
        self.screen.blit(clouds, (0, 0))

    def _draw_pipe(self, model: RenderModel, pipe: PipeView):
        _, height = model.viewport
        x, top_h, w = pipe.x, pipe.top_h, pipe.width
        bot_y = top_h + pipe.gap
        bot_h = height - model.ground_height - bot_y

        # Top body and lip
        pygame.draw.rect(self.screen, PIPE_COLOR, (x, 0, w, top_h))
        pygame.draw.rect(self.screen, PIPE_DARK, (x, 0, 6, top_h))
        pygame.draw.rect(self.screen, PIPE_DARK, (x + w - 6, 0, 6, top_h))
        pygame.draw.rect(self.screen, PIPE_LIP, (x - LIP_W, top_h - LIP_H, w + LIP_W * 2, LIP_H))
        pygame.draw.rect(self.screen, PIPE_DARK, (x - LIP_W, top_h - LIP_H, w + LIP_W * 2, 4))
        pygame.draw.rect(self.screen, PIPE_DARK, (x - LIP_W, top_h - 4, w + LIP_W * 2, 4))

        # Bottom body and lip
        pygame.draw.rect(self.screen, PIPE_COLOR, (x, bot_y, w, bot_h))
        pygame.draw.rect(self.screen, PIPE_DARK, (x, bot_y, 6, bot_h))
        pygame.draw.rect(self.screen, PIPE_DARK, (x + w - 6, bot_y, 6, bot_h))
        pygame.draw.rect(self.screen, PIPE_LIP, (x - LIP_W, bot_y, w + LIP_W * 2, LIP_H))
        pygame.draw.rect(self.screen, PIPE_DARK, (x - LIP_W, bot_y, w + LIP_W * 2, 4))
        pygame.draw.rect(self.screen, PIPE_DARK, (x - LIP_W, bot_y + LIP_H - 4, w + LIP_W * 2, 4))

    def _draw_ground(self, model: RenderModel):
        width, height = model.viewport
        g_y = height - model.ground_height
        pygame.draw.rect(self.screen, GROUND_COLOR, (0, g_y, width, model.ground_height))
        pygame.draw.rect(self.screen, GROUND_DARK, (0, g_y, width, 4))

        x = -model.bg_offset
        while x < width + 24:
            pygame.draw.polygon(self.screen, GRASS, [(x, g_y), (x + 12, g_y - 10), (x + 24, g_y)])
            x += 24

    def _draw_bird(self, model: RenderModel):
        w, h = int(model.bird_w), int(model.bird_h)
        # Room for the beak and the raised wing
        size = max(w, h) + 24
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        c = size // 2

        pygame.draw.ellipse(sprite, BIRD_BODY, (c - w // 2, c - h // 2, w, h))
        wing_y = -8 if model.bird_flapping else 2
        pygame.draw.ellipse(sprite, BIRD_WING, (c - 4 - 12, c + wing_y - 7, 24, 14))
        pygame.draw.circle(sprite, BIRD_EYE, (c + 10, c - 6), 7)
        pygame.draw.circle(sprite, BIRD_PUPIL, (c + 12, c - 5), 3)
        pygame.draw.polygon(sprite, BIRD_BEAK, [(c + 16, c - 1), (c + 26, c + 3), (c + 16, c + 7)])

        # pygame rotates counter-clockwise; positive rotation means nose down
        rotated = pygame.transform.rotate(sprite, -model.bird_rotation)
        self.screen.blit(rotated, rotated.get_rect(center=(int(model.bird_x), int(model.bird_y))))

    def _draw_hud(self, model: RenderModel):
        width, height = model.viewport

        if model.mode is Mode.IDLE:
            self._centered(self.large_font, "SKYFLAP", height * 0.2)
            self._centered(self.font, "Space / Click / Tap to flap", height * 0.55)
            return

        score = self.large_font.render(str(model.score), True, WHITE)
        self.screen.blit(score, (width // 2 - score.get_width() // 2, 40))

        if model.mode is Mode.TERMINAL:
            panel = pygame.Surface((int(width), int(height)), pygame.SRCALPHA)
            panel.fill(PANEL)
            self.screen.blit(panel, (0, 0))
            self._centered(self.large_font, "GAME OVER", height // 2 - 90)
            self._centered(self.font, f"Score: {model.score}", height // 2 - 30)
            self._centered(self.font, f"Best: {model.best_score}", height // 2 + 5)

            button = restart_button_rect(model.viewport)
            pygame.draw.rect(self.screen, PIPE_COLOR, button, border_radius=8)
            label = self.font.render("Restart (R)", True, WHITE)
            self.screen.blit(label, label.get_rect(center=button.center))

    def _centered(self, font, text, y):
        surf = font.render(text, True, WHITE)
        self.screen.blit(surf, (self.screen.get_width() // 2 - surf.get_width() // 2, y))
