from abc import abstractmethod

from genro_endpoints import EndpointBase


class CrudEndpoint(EndpointBase):
    """Abstract intermediate base: never registered itself."""

    prefix = ""

    @abstractmethod
    def items(self) -> list: ...

    def handle_endpoint(self, router):
        items = self.items

        router.add_api_route(self.prefix, lambda: items(), methods=["GET"])


class OrdersEndpoint(CrudEndpoint):
    prefix = "/orders"

    def items(self):
        return ["order-1", "order-2"]
