from genro_endpoints import EndpointBase, EndpointInterface


class StatsEndpoint(EndpointBase):
    def handle_endpoint(self, router):
        settings = self.configuration

        @router.get("/admin/stats")
        def stats():
            return {"scope": settings.scope, "routes": len(router.routes)}


class PingEndpoint(EndpointInterface):
    def handle_endpoint(self, app):
        app.add_api_route("/admin/ping", lambda: "pong", methods=["GET"])
