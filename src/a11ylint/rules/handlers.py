from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

EVENT_HANDLERS_BY_TYPE: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "clipboard": ("onCopy", "onCut", "onPaste"),
        "composition": ("onCompositionEnd", "onCompositionStart", "onCompositionUpdate"),
        "keyboard": ("onKeyDown", "onKeyPress", "onKeyUp"),
        "focus": ("onFocus", "onBlur"),
        "form": ("onChange", "onInput", "onSubmit"),
        "mouse": (
            "onClick",
            "onContextMenu",
            "onDblClick",
            "onDoubleClick",
            "onDrag",
            "onDragEnd",
            "onDragEnter",
            "onDragExit",
            "onDragLeave",
            "onDragOver",
            "onDragStart",
            "onDrop",
            "onMouseDown",
            "onMouseEnter",
            "onMouseLeave",
            "onMouseMove",
            "onMouseOut",
            "onMouseOver",
            "onMouseUp",
        ),
        "selection": ("onSelect",),
        "touch": ("onTouchCancel", "onTouchEnd", "onTouchMove", "onTouchStart"),
        "ui": ("onScroll",),
        "wheel": ("onWheel",),
        "media": (
            "onAbort",
            "onCanPlay",
            "onCanPlayThrough",
            "onDurationChange",
            "onEmptied",
            "onEncrypted",
            "onEnded",
            "onError",
            "onLoadedData",
            "onLoadedMetadata",
            "onLoadStart",
            "onPause",
            "onPlay",
            "onPlaying",
            "onProgress",
            "onRateChange",
            "onSeeked",
            "onSeeking",
            "onStalled",
            "onSuspend",
            "onTimeUpdate",
            "onVolumeChange",
            "onWaiting",
        ),
        "image": ("onLoad", "onError"),
        "animation": ("onAnimationStart", "onAnimationEnd", "onAnimationIteration"),
        "transition": ("onTransitionEnd",),
    }
)

# handlers that only make sense on something a user can operate
INTERACTION_HANDLERS: tuple[str, ...] = (
    *EVENT_HANDLERS_BY_TYPE["focus"],
    *EVENT_HANDLERS_BY_TYPE["image"],
    *EVENT_HANDLERS_BY_TYPE["keyboard"],
    *EVENT_HANDLERS_BY_TYPE["mouse"],
)
