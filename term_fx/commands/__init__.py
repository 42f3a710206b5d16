"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by term_fx.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports, keep this list in sync with command modules
import term_fx.commands.clear as _clear  # noqa: F401
import term_fx.commands.hsv as _hsv  # noqa: F401
import term_fx.commands.palette as _palette  # noqa: F401
import term_fx.commands.preview as _preview  # noqa: F401
import term_fx.commands.quantize as _quantize  # noqa: F401
import term_fx.commands.set as _set  # noqa: F401
import term_fx.commands.wheel as _wheel  # noqa: F401
