"""bindery - hierarchical data binding with inheritable contexts."""

from .binding import Binding as Binding
from .binding import binding as binding
from .bindings import PathBinding as PathBinding
from .container import BindableContainer as BindableContainer
from .events import PropertyChanged as PropertyChanged
from .layout import Layout as Layout
from .node import CONTEXT_PROPERTY as CONTEXT_PROPERTY
from .node import BindableNode as BindableNode
from .properties import BindableProperty as BindableProperty
