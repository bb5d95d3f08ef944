""" Urls of the modules define here... """

# Swagger API...
from ..config.swagger import api

# All Namespaces...
from ..system.handler import system_namespace
from ..documents.handler import documents_namespace
from ..query.handler import query_namespace





class URLs:
    """ All application namespaces are registered here... """

    @staticmethod
    def add_namespaces():
        api.add_namespace(system_namespace)
        api.add_namespace(documents_namespace)
        api.add_namespace(query_namespace)
