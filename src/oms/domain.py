"""Order management bounded context — users, products and the order lifecycle.

Orders move through PENDING → CONFIRMED → SHIPPED, or to CANCELLED before
shipping. Product stock is reserved when an order is confirmed and handed
back when a confirmed order is cancelled.
"""

from protean.domain import Domain

from oms.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="oms")

logger = get_logger(__name__)

# Domain Composition Root
oms = Domain(name="oms")
