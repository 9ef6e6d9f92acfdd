# main.py
import argparse
import logging
import sys
from typing import List, Optional
import pygame
from voxeltrace.camera.camera import Camera, default_camera
from voxeltrace.camera.controls import ACTIONS, apply_action, apply_actions
from voxeltrace.config import (
    CONTROL_SETTINGS, LIGHT_SETTINGS, LOG_FORMAT, LOG_LEVEL, RENDER_SETTINGS, SCENE_SETTINGS
)
from voxeltrace.core.color import Color
from voxeltrace.core.light import Light
from voxeltrace.core.vector import Vector3
from voxeltrace.geometry.diorama import create_diorama, scatter_decorations
from voxeltrace.geometry.world import Scene
from voxeltrace.renderer.framebuffer import Framebuffer
from voxeltrace.renderer.raytracer import Renderer

logger = logging.getLogger(__name__)

# Held keys mapped to camera actions, one tick per frame
KEY_BINDINGS = {
    pygame.K_a: 'orbit_left',
    pygame.K_d: 'orbit_right',
    pygame.K_w: 'zoom_in',
    pygame.K_s: 'zoom_out',
    pygame.K_q: 'raise',
    pygame.K_e: 'lower',
}

def default_light() -> Light:
    return Light(
        Vector3(*LIGHT_SETTINGS['position']),
        Color(*LIGHT_SETTINGS['color']),
        LIGHT_SETTINGS['intensity'],
    )

def build_scene(seed: int, decorations: int) -> Scene:
    scene = create_diorama()
    if decorations > 0:
        scatter_decorations(scene, seed, decorations)
    return scene

def render_frame(width: int, height: int, camera: Camera, scene: Scene, light: Light,
                 workers: int = 1) -> Framebuffer:
    framebuffer = Framebuffer(width, height, Color(*SCENE_SETTINGS['background_color']))
    framebuffer.clear()
    Renderer(workers).render(framebuffer, camera, scene, light)
    return framebuffer

class Application:
    """
    Interactive viewer: re-renders the diorama after every control tick.

    Camera changes are applied between frames only; the frame being traced
    always sees one consistent camera state.
    """
    def __init__(self, width: int, height: int, scene: Scene, workers: int = 1):
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Voxel Diorama - Raytracer")

        self.camera = default_camera(width / height)
        self.scene = scene
        self.light = default_light()
        self.renderer = Renderer(workers)
        self.framebuffer = Framebuffer(width, height, Color(*SCENE_SETTINGS['background_color']))
        self.clock = pygame.time.Clock()
        self.needs_render = True

    def handle_input(self) -> bool:
        """
        Applies held control keys to the camera. Returns False on quit.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        keys = pygame.key.get_pressed()
        for key, action in KEY_BINDINGS.items():
            if keys[key]:
                apply_action(self.camera, action)
                self.needs_render = True
        return True

    def present(self):
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(self.framebuffer.to_rgb_array().swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self):
        print("Controls:")
        print("  A/D - Orbit camera")
        print("  W/S - Zoom in/out")
        print("  Q/E - Raise/lower camera")
        print("  ESC - Quit")

        try:
            running = True
            while running:
                self.clock.tick(CONTROL_SETTINGS['target_fps'])
                running = self.handle_input()
                if running and self.needs_render:
                    self.framebuffer.clear()
                    self.renderer.render(self.framebuffer, self.camera, self.scene, self.light)
                    self.needs_render = False
                    logger.info("Frame rendered in %.2fs (%r)", self.renderer.last_frame_time, self.camera)
                    self.present()
        finally:
            pygame.quit()

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="voxeltrace", description="Voxel diorama ray tracer")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub):
        sub.add_argument("--width", type=int, default=RENDER_SETTINGS['width'])
        sub.add_argument("--height", type=int, default=RENDER_SETTINGS['height'])
        sub.add_argument("--workers", type=int, default=RENDER_SETTINGS['workers'])
        sub.add_argument("--seed", type=int, default=SCENE_SETTINGS['decoration_seed'])
        sub.add_argument("--decorations", type=int, default=SCENE_SETTINGS['decoration_count'])

    render = subparsers.add_parser("render", help="Render one frame to an image file")
    add_common(render)
    render.add_argument("--output", "-o", default="render.png")
    render.add_argument("--orbit", nargs="*", default=[], choices=sorted(ACTIONS),
                        metavar="ACTION", help="Camera actions replayed before rendering")

    view = subparsers.add_parser("view", help="Open the interactive viewer")
    add_common(view)

    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error(f"image size must be positive, got {args.width}x{args.height}")
    if args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")
    return args

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        scene = build_scene(args.seed, args.decorations)
        if args.command == "render":
            camera = apply_actions(default_camera(args.width / args.height), args.orbit)
            framebuffer = render_frame(args.width, args.height, camera, scene,
                                       default_light(), args.workers)
            framebuffer.save(args.output)
            logger.info("Saved %dx%d render to %s", args.width, args.height, args.output)
        else:
            Application(args.width, args.height, scene, args.workers).run()
    except (ValueError, OSError) as e:
        logger.error("voxeltrace failed: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
