# Replays an event trace with matplotlib, one frame per event.

import logging

import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.collections import LineCollection

from .config import AnimationConfig
from .events import Bucket, EventKind

logger = logging.getLogger(__name__)

POINT_COLOR = '#000000'
CURRENT_COLOR = '#4287f5'
HULL_COLOR = '#4CE45C'
HIDDEN_COLOR = '#D8D8D8'
SOLID_COLOR = '#ff0066'
BRIDGE_COLOR = '#E26EE5'
PAIR_COLOR = '#A9A9A9'
REJECTED_COLOR = '#337357'
MEDIAN_COLOR = '#00bbbb'
SUPPORT_COLOR = '#820300'
BUCKET_COLORS = {
    Bucket.LESS: '#D20103',
    Bucket.EQUAL: '#FFDE59',
    Bucket.GREATER: '#7DDA58',
}


def _empty_state(points):
    return {
        'all_points': list(points),
        'current_points': [],
        'hull_points': [],
        'hidden_points': [],
        'solid_edges': [],      # (p1, p2, colour)
        'dashed_edges': [],     # (p1, p2, colour)
        'median_x': None,
        'supporting': None,     # (point, slope)
        'bridge': None,
        'status': "Initializing...",
    }


def _snapshot(state):
    frame = dict(state)
    for key in ('current_points', 'hull_points', 'hidden_points', 'solid_edges', 'dashed_edges'):
        frame[key] = list(state[key])
    return frame


def _apply(state, event, solid_color, dashed_color):
    kind, args = event.kind, event.payload

    if kind is EventKind.MARK_CURRENT:
        state['current_points'].append(args[0])
        state['status'] = f"Current point {args[0]}"
    elif kind is EventKind.MARK_HULL:
        if args[0] not in state['hull_points']:
            state['hull_points'].append(args[0])
        state['status'] = f"Point {args[0]} is on the hull"
    elif kind is EventKind.ADD_SOLID_EDGE:
        state['solid_edges'].append((args[0], args[1], solid_color))
        state['status'] = f"Edge {args[0]} -> {args[1]}"
    elif kind is EventKind.REMOVE_SOLID_EDGE:
        for i in range(len(state['solid_edges']) - 1, -1, -1):
            if state['solid_edges'][i][:2] == (args[0], args[1]):
                del state['solid_edges'][i]
                break
    elif kind is EventKind.ADD_DASHED_EDGE:
        state['dashed_edges'].append((args[0], args[1], dashed_color))
        state['status'] = f"Checking {args[0]} -> {args[1]}"
    elif kind is EventKind.REMOVE_DASHED_EDGES:
        state['dashed_edges'].clear()
    elif kind is EventKind.HIDE_POINTS:
        # confirmed and current points stay visible
        for p in args[0]:
            if p not in state['hull_points'] and p not in state['current_points']:
                state['hidden_points'].append(p)
        if args[0]:
            state['status'] = f"Discarded {len(args[0])} point(s)"
    elif kind is EventKind.REVEAL_ALL:
        state['hidden_points'].clear()
    elif kind is EventKind.DRAW_MEDIAN_LINE:
        state['median_x'] = args[0]
        state['status'] = f"Median line x = {args[0]}"
    elif kind is EventKind.DRAW_SUPPORTING_LINE:
        state['supporting'] = (args[0], args[1])
        state['status'] = f"Supporting line through {args[0]}, slope {args[1]:.3f}"
    elif kind is EventKind.HIGHLIGHT_BUCKET:
        p1, p2, bucket = args
        for i, (a, b, _) in enumerate(state['dashed_edges']):
            if (a, b) == (p1, p2):
                state['dashed_edges'][i] = (a, b, BUCKET_COLORS[bucket])
        state['status'] = f"Slope of {p1} -> {p2} is {bucket.value} than the median"
    elif kind is EventKind.MARK_BRIDGE:
        state['bridge'] = (args[0], args[1])
        state['status'] = f"Supporting points {args[0]} and {args[1]}"
    elif kind is EventKind.FINALIZE_TERMINAL_RUN:
        chain = args[0]
        for a, b in zip(chain, chain[1:]):
            state['solid_edges'].append((a, b, SOLID_COLOR))
        for p in chain:
            if p not in state['hull_points']:
                state['hull_points'].append(p)
    elif kind is EventKind.CLEAR_TEMPORARY:
        state['dashed_edges'].clear()
        state['median_x'] = None
        state['supporting'] = None
        state['bridge'] = None


def build_frames(points, events, solid_color=SOLID_COLOR, dashed_color=PAIR_COLOR):
    """
    Fold an event trace into one state snapshot per event.

    The first frame shows the bare point set; the last one carries the hull.
    """
    state = _empty_state(points)
    frames = [_snapshot(state)]
    for event in events:
        _apply(state, event, solid_color, dashed_color)
        frames.append(_snapshot(state))
    frames[-1]['status'] = f"Hull complete! Found {len(state['hull_points'])} points."
    return frames


def _axis_limits(points, config):
    if not points:
        return (0, config.canvas_width), (0, config.canvas_height)
    min_x = min(p[0] for p in points) - 1
    max_x = max(p[0] for p in points) + 1
    min_y = min(p[1] for p in points) - 1
    max_y = max(p[1] for p in points) + 1
    pad_x = (max_x - min_x) * 0.05
    pad_y = (max_y - min_y) * 0.05
    return (min_x - pad_x, max_x + pad_x), (min_y - pad_y, max_y + pad_y)


def animate(points, events, title="Convex Hull", config=None, save_path=None, show=True,
            solid_color=SOLID_COLOR, dashed_color=PAIR_COLOR):
    """Animate a trace with FuncAnimation; optionally save it (e.g. to a .gif)."""
    config = config or AnimationConfig()
    frames = build_frames(points, events, solid_color, dashed_color)
    (x0, x1), (y0, y1) = _axis_limits(points, config)

    fig, ax = plt.subplots(figsize=config.figsize)
    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)
    ax.set_aspect('equal', adjustable='box')
    ax.set_title(title)

    scatter_all_points = ax.scatter([p[0] for p in points], [p[1] for p in points],
                                    c=POINT_COLOR, s=20, zorder=3, label="All Points")
    hidden_marker, = ax.plot([], [], 'o', ms=5, color=HIDDEN_COLOR, zorder=4, label="Discarded")
    current_marker, = ax.plot([], [], 'o', ms=10, color=CURRENT_COLOR, zorder=5, label="Current Point")
    hull_marker, = ax.plot([], [], 'o', ms=10, color=HULL_COLOR, zorder=6, label="Hull Point")
    bridge_marker, = ax.plot([], [], 's', ms=9, mfc='none', mew=2, color=BRIDGE_COLOR, zorder=7,
                             label="Bridge endpoints")
    solid_lines = LineCollection([], linewidths=3, zorder=2)
    dashed_lines = LineCollection([], linewidths=2, linestyles='dashed', zorder=1)
    ax.add_collection(solid_lines)
    ax.add_collection(dashed_lines)
    median_line, = ax.plot([], [], '--', lw=2, color=MEDIAN_COLOR, label="Median line")
    support_line, = ax.plot([], [], '--', lw=2, color=SUPPORT_COLOR, label="Supporting line")

    status_text_ax = ax.text(0.02, 0.98, "", transform=ax.transAxes, ha="left", va="top", fontsize=9,
                             bbox=dict(boxstyle="round,pad=0.3", fc="wheat", alpha=0.7))
    ax.legend(fontsize='small', loc='lower right')

    def set_points(marker, pts):
        marker.set_data([p[0] for p in pts], [p[1] for p in pts])

    def update_animation(frame_data):
        set_points(hidden_marker, frame_data['hidden_points'])
        set_points(current_marker, frame_data['current_points'])
        set_points(hull_marker, frame_data['hull_points'])
        set_points(bridge_marker, frame_data['bridge'] or [])

        solid = frame_data['solid_edges']
        solid_lines.set_segments([(a, b) for a, b, _ in solid])
        solid_lines.set_color([c for _, _, c in solid])
        dashed = frame_data['dashed_edges']
        dashed_lines.set_segments([(a, b) for a, b, _ in dashed])
        dashed_lines.set_color([c for _, _, c in dashed])

        if frame_data['median_x'] is not None:
            median_line.set_data([frame_data['median_x']] * 2, [y0, y1])
        else:
            median_line.set_data([], [])

        if frame_data['supporting'] is not None:
            (px, py), slp = frame_data['supporting']
            support_line.set_data([x0, x1], [py + slp * (x0 - px), py + slp * (x1 - px)])
        else:
            support_line.set_data([], [])

        status_text_ax.set_text(frame_data['status'])
        return (scatter_all_points, hidden_marker, current_marker, hull_marker, bridge_marker,
                solid_lines, dashed_lines, median_line, support_line, status_text_ax)

    ani = animation.FuncAnimation(fig,
                                  update_animation,
                                  frames=frames,
                                  interval=config.interval_ms,
                                  repeat=config.repeat)
    if save_path:
        logger.info("saving %d frames to %s", len(frames), save_path)
        ani.save(save_path, writer='pillow', fps=max(1, round(1000 / config.interval_ms)))
    if show:
        plt.tight_layout()
        plt.show()
    return ani
