import pygame

from .config import Config
from .entities import Ball, GameState, GameStatus, Paddle


class Renderer:
    def __init__(self, cfg: Config, surface: pygame.Surface):
        self.cfg = cfg
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.font_score = pygame.font.SysFont(*cfg.score_font)
        self.font_prompt = pygame.font.SysFont(*cfg.prompt_font)

    def draw_text(self, font, text, color, position):
        # position is the left end of the text baseline
        x, y = position
        surf = font.render(text, True, color)
        self.surface.blit(surf, (int(x), int(y - font.get_ascent())))

    def draw_paddle(self, paddle: Paddle):
        rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))
        pygame.draw.rect(self.surface, self.cfg.fg_color, rect)

    def draw_ball(self, ball: Ball):
        pygame.draw.circle(self.surface, self.cfg.ball_color, (int(ball.x), int(ball.y)), int(ball.width))

    def draw(self, w, h, left: Paddle, right: Paddle, ball: Ball, status: GameStatus):
        self.surface.fill(self.cfg.bg_color)
        self.draw_paddle(left)
        self.draw_paddle(right)
        self.draw_text(self.font_score, str(status.score_left), self.cfg.fg_color, (w / 4, 40))
        self.draw_text(self.font_score, str(status.score_right), self.cfg.fg_color, (w / 1.25 - 30, 40))
        self.draw_ball(ball)
        if not status.active:
            self.draw_text(self.font_prompt, self.cfg.prompt_text, self.cfg.prompt_color,
                           (w / 2 - 230, h / 2 + 40))

    def render(self, state: GameState):
        self.draw(self.cfg.width, self.cfg.height, state.left, state.right, state.ball, state.status)
