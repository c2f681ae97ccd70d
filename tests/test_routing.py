import unittest

from pgdumpsplit import constants, routing
from pgdumpsplit.models import EntityType


class RoutingTestCase(unittest.TestCase):

    def test_every_entity_type_has_a_route(self):
        self.assertEqual(set(routing.ROUTES), set(EntityType))

    def test_catalog_size(self):
        self.assertEqual(len(EntityType), 29)

    def test_split_out_types(self):
        expectations = {
            EntityType.FUNCTION: (True, routing.Destination.FUNCTION,
                                  constants.FUNCTION_FOLDER),
            EntityType.TABLE: (True, routing.Destination.SCHEMA_OBJECT,
                               constants.TABLE_FOLDER),
            EntityType.VIEW: (True, routing.Destination.SCHEMA_OBJECT,
                              constants.VIEW_FOLDER),
            EntityType.TYPE: (True, routing.Destination.SCHEMA_OBJECT,
                              constants.TYPE_FOLDER),
            EntityType.SCHEMA: (False, routing.Destination.SCHEMA, None),
            EntityType.EXTENSION: (False, routing.Destination.NAMED,
                                   constants.EXTENSION_FOLDER),
            EntityType.EVENT_TRIGGER: (False, routing.Destination.NAMED,
                                       constants.EVENT_TRIGGER_FOLDER),
            EntityType.DEFAULT_ACL: (False, routing.Destination.OWNED,
                                     constants.ROLE_FOLDER)
        }
        for entity_type, (requires_schema, destination, folder) in \
                expectations.items():
            route = routing.route_for(entity_type)
            self.assertEqual(route.requires_schema, requires_schema)
            self.assertEqual(route.destination, destination)
            self.assertEqual(route.folder, folder)

    def test_global_discarded_types(self):
        for entity_type in {EntityType.ACL, EntityType.COMMENT,
                            EntityType.DATABASE}:
            route = routing.route_for(entity_type)
            self.assertFalse(route.requires_schema, entity_type)
            self.assertEqual(route.destination, routing.Destination.DISCARD)

    def test_schema_scoped_discarded_types(self):
        for entity_type in {EntityType.INDEX, EntityType.TRIGGER,
                            EntityType.SEQUENCE, EntityType.FK_CONSTRAINT,
                            EntityType.TABLE_DATA, EntityType.POLICY}:
            route = routing.route_for(entity_type)
            self.assertTrue(route.requires_schema, entity_type)
            self.assertEqual(route.destination, routing.Destination.DISCARD)
