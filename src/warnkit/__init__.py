"""warnkit: typed, observable application warnings."""

__version__ = "0.1.0"

from warnkit.errors import (  # noqa: E402
    ConfigError,
    KindError,
    ParseError,
    UnknownKindError,
    WarningAsError,
    WarnkitError,
)
from warnkit.kinds import (  # noqa: E402
    CONNECTION_WARNING,
    DEPRECATION_WARNING,
    DISK_WARNING,
    FUTURE_WARNING,
    MEMORY_WARNING,
    OS_WARNING,
    PENDING_DEPRECATION_WARNING,
    PROCESS_WARNING,
    STABILITY_WARNING,
    WARNING,
    WarningKind,
    ancestry,
    get_kind,
    is_subkind,
    known_kinds,
    register_kind,
)
from warnkit.manager import Subscription, WarningManager  # noqa: E402
from warnkit.messages import FeatureData  # noqa: E402
from warnkit.models import WarningRecord  # noqa: E402
from warnkit.observers import (  # noqa: E402
    CallbackObserver,
    CollectingObserver,
    ConsoleWarningObserver,
    Observer,
)
from warnkit.warning_policy import WarningPolicy, WarnkitWarning  # noqa: E402
