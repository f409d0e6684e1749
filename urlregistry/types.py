from collections.abc import Callable
from datetime import datetime
from typing import Any


# Type alias for configuration documents
type RegistryConfiguration = dict[str, Any]

# Type aliases for injectable registry collaborators
type Clock = Callable[[], datetime]
type ShortcodeGenerator = Callable[[int], str]
type IdFactory = Callable[[], str]
