import dearpygui.dearpygui as dpg
import numpy as np

from audio_engine import AudioEngine
from frame_loop import FrameLoop
from geometry import Point2D
from logging_utils import log_event, set_log_level
from rope_toy import RopeToy
from state import AppState

# --- SETTINGS ---
W_WIDTH = 1200
W_HEIGHT = 900
PANEL_WIDTH = 300
PADDING = 16

ROPE_COLOR = (0, 255, 204, 255)
HANDLE_COLOR = (255, 255, 255, 255)
WINDOW_COLOR = (90, 60, 160, 255)
WINDOW_FILL = (40, 25, 80, 255)

config = AppState()
set_log_level(config.log_level)

# The engine is only built on first grab; keep a handle for the scope
engines = []


def make_engine():
    engine = AudioEngine(config)
    engines.append(engine)
    return engine


toy = RopeToy(config, make_engine)


# --- LAYOUT ---
def canvas_ready():
    if not dpg.does_item_exist("canvas"):
        return False
    w, h = dpg.get_item_rect_size("canvas")
    return w > 0 and h > 0


def on_resize(sender=None, app_data=None):
    w = max(1, dpg.get_viewport_client_width() - PANEL_WIDTH - 3 * PADDING)
    h = max(1, dpg.get_viewport_client_height() - 2 * PADDING)
    dpg.configure_item("canvas", width=w, height=h)
    toy.update_layout(Point2D(w / 2.0, h / 2.0))


# --- POINTER ---
def canvas_pos():
    mx, my = dpg.get_mouse_pos(local=False)
    ox, oy = dpg.get_item_rect_min("canvas")
    return Point2D(mx - ox, my - oy)


def on_pointer_down(sender, app_data):
    if canvas_ready():
        toy.pointer_down(canvas_pos())


def on_pointer_move(sender, app_data):
    if canvas_ready():
        toy.pointer_move(canvas_pos())


def on_pointer_up(sender, app_data):
    toy.pointer_up()


def update_config(sender, app_data, user_data):
    setattr(config, user_data, app_data)


# --- FRAME ---
def draw_frame():
    frame = toy.tick()
    if frame is None:
        return

    dpg.delete_item("canvas", children_only=True)
    center = tuple(frame.window_center)
    end = tuple(frame.rope_end)
    dpg.draw_circle(center, frame.window_size / 2.0, color=WINDOW_COLOR, fill=WINDOW_FILL, thickness=3, parent="canvas")
    dpg.draw_line(center, end, color=ROPE_COLOR, thickness=2, parent="canvas")
    dpg.draw_circle(end, config.handle_radius, color=HANDLE_COLOR, fill=HANDLE_COLOR, parent="canvas")

    t = frame.targets
    dpg.set_value(
        "readout",
        f"length {frame.geometry.length:6.1f}  angle {frame.geometry.angle:+.2f}\n"
        f"freq {t.frequency:7.2f} Hz  gain {t.gain:.2f}\n"
        f"lfo {t.mod_rate:.2f} Hz x {t.mod_depth:.1f}  cutoff {t.cutoff:.0f} Hz",
    )

    # --- OSCILLOSCOPE ---
    if engines:
        signal = engines[0].last_samples
        dpg.set_value("scope_series", [np.arange(len(signal)).tolist(), signal.tolist()])


# --- DPG GUI SETUP ---
dpg.create_context()
# Pointer callbacks and frames share the main thread
dpg.configure_app(manual_callback_management=True)

with dpg.window(tag="Primary Window"):

    # Split Layout: Left (Controls) | Right (Rope)
    with dpg.group(horizontal=True):

        # --- LEFT PANEL: CONFIGURATION ---
        with dpg.child_window(width=PANEL_WIDTH):
            dpg.add_text("SYNTH SETTINGS", color=(0, 255, 204))
            dpg.add_separator()
            dpg.add_slider_float(label="Max Gain", default_value=config.max_gain, max_value=0.75, callback=update_config, user_data="max_gain")
            # Settle: 0.005 (Heavy) -> 0.1 (Snappy)
            dpg.add_slider_float(label="Settle", default_value=config.settle_smoothing, min_value=0.005, max_value=0.1, callback=update_config, user_data="settle_smoothing")
            dpg.add_slider_float(label="Low Pitch", default_value=config.min_pitch, min_value=55.0, max_value=220.0, callback=update_config, user_data="min_pitch")
            dpg.add_slider_float(label="High Pitch", default_value=config.max_pitch, min_value=440.0, max_value=1760.0, callback=update_config, user_data="max_pitch")

            dpg.add_spacer(height=20)
            dpg.add_text("ROPE", color=(0, 255, 204))
            dpg.add_separator()
            dpg.add_text("", tag="readout")

            dpg.add_spacer(height=20)
            dpg.add_text("Waveform (Time Domain)")
            with dpg.plot(height=150, width=-1, no_menus=True):
                dpg.add_plot_axis(dpg.mvXAxis, no_tick_labels=True)
                y_axis = dpg.add_plot_axis(dpg.mvYAxis, label="Amp")
                dpg.set_axis_limits(y_axis, -1.0, 1.0)
                dpg.add_line_series([], [], tag="scope_series", parent=y_axis)

        # --- RIGHT PANEL: ROPE ---
        with dpg.child_window(width=-1, no_scrollbar=True):
            dpg.add_drawlist(width=W_WIDTH - PANEL_WIDTH, height=W_HEIGHT, tag="canvas")

with dpg.handler_registry():
    dpg.add_mouse_click_handler(button=dpg.mvMouseButton_Left, callback=on_pointer_down)
    dpg.add_mouse_move_handler(callback=on_pointer_move)
    dpg.add_mouse_release_handler(button=dpg.mvMouseButton_Left, callback=on_pointer_up)

loop = FrameLoop(draw_frame, canvas_ready, config)

# --- STARTUP ---
dpg.create_viewport(title="Rope Synth", width=W_WIDTH, height=W_HEIGHT)
dpg.set_viewport_resize_callback(on_resize)
dpg.setup_dearpygui()
dpg.set_primary_window("Primary Window", True)
dpg.show_viewport()
on_resize()
log_event("INFO", "App", "Rope synth running")

while dpg.is_dearpygui_running() and loop.active:
    dpg.run_callbacks(dpg.get_callback_queue())
    loop.run_frame()
    dpg.render_dearpygui_frame()

# --- CLEANUP ---
loop.cancel()
toy.teardown()
dpg.destroy_context()
