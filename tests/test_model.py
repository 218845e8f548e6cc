import json

from flask import request, jsonify

from remotely import Model, Collection, MissingAttributeError
from tests import BaseTestCase


class ModelTestCase(BaseTestCase):

    def setUp(self):
        super(ModelTestCase, self).setUp()
        self.adventures = {1: {"id": 1, "name": "Marceline Quest", "type": "MATHEMATICAL!"}}

        @self.app.route('/adventures', methods=['GET', 'POST'])
        def adventures():
            if request.method == 'POST':
                adventure = json.loads(request.get_data(as_text=True))
                if not adventure.get('name'):
                    return jsonify({"errors": {"name": "required"}}), 422
                adventure['id'] = len(self.adventures) + 1
                self.adventures[adventure['id']] = adventure
                return jsonify(adventure)
            return jsonify(list(self.adventures.values()))

        @self.app.route('/adventures/search')
        def search_adventures():
            return jsonify([a for a in self.adventures.values() if a['type'] == request.args.get('type')])

        @self.app.route('/adventures/<int:id>', methods=['GET', 'PUT', 'DELETE'])
        def adventure(id):
            if id not in self.adventures:
                return jsonify({"message": "Not Found"}), 404
            if request.method == 'PUT':
                self.adventures[id].update(json.loads(request.get_data(as_text=True)))
            elif request.method == 'DELETE':
                del self.adventures[id]
                return '', 204
            return jsonify(self.adventures[id])

        @self.registry.add_model
        class Adventure(Model):
            class Meta:
                app = 'adventure_app'
                uri = '/adventures'

        self.Adventure = Adventure
        self.attributes = {"id": 1, "name": "Marceline Quest", "type": "MATHEMATICAL!"}

    def test_attributes(self):
        adventure = self.Adventure(self.attributes)

        self.assertEqual(self.attributes, adventure.attributes)
        self.assertEqual(['id', 'name', 'type'], list(adventure.attributes))
        self.assertEqual('Marceline Quest', adventure.name)
        self.assertEqual(1, adventure.id)

    def test_keyword_attributes(self):
        adventure = self.Adventure({"name": "Fun"}, type='lame')
        self.assertEqual({"name": "Fun", "type": "lame"}, adventure.as_dict())

    def test_keys_are_normalized(self):
        adventure = self.Adventure({1: 'one', 'name': 'Fun'})
        self.assertEqual(['1', 'name'], list(adventure.attributes))
        self.assertEqual('one', adventure.get_attribute('1'))

    def test_set_attribute(self):
        adventure = self.Adventure(self.attributes)
        adventure.name = 'City of Thieves'

        self.assertEqual('City of Thieves', adventure.name)
        self.assertEqual('City of Thieves', adventure.attributes['name'])

    def test_missing_attribute(self):
        adventure = self.Adventure(self.attributes)

        with self.assertRaises(AttributeError):
            adventure.height
        with self.assertRaises(AttributeError):
            adventure.height = 3
        with self.assertRaises(AttributeError):
            adventure.get_attribute('height')
        with self.assertRaises(AttributeError):
            adventure.query_attribute('height')

        self.assertFalse(hasattr(adventure, 'height'))

    def test_generic_attributes(self):
        adventure = self.Adventure(self.attributes)
        adventure.set_attribute('height', 3)

        self.assertEqual(3, adventure.height)
        self.assertEqual(3, adventure.get_attribute('height'))

        adventure.height = 4
        self.assertEqual(4, adventure.height)

    def test_set_attribute_named_like_class_member(self):
        adventure = self.Adventure(id=1, name='Fun', all='x')
        adventure.all = 'y'
        adventure.id = 2

        self.assertEqual('y', adventure.attributes['all'])
        self.assertEqual(2, adventure.attributes['id'])
        self.assertNotIn('all', adventure.__dict__)

        adventure.id = 1
        self.assertIs(True, adventure.save())
        self.assertEqual('y', self.last_request_json()['all'])

    def test_query_attribute(self):
        adventure = self.Adventure(name='Fun', secret='', parts=[])

        self.assertIs(True, adventure.query_attribute('name'))
        self.assertIs(False, adventure.query_attribute('secret'))
        self.assertIs(False, adventure.query_attribute('parts'))

    def test_new_record(self):
        adventure = self.Adventure(self.attributes)
        self.assertFalse(adventure.is_new_record())
        self.assertEqual([1], adventure.to_key())

        adventure.id = None
        self.assertTrue(adventure.is_new_record())
        self.assertIsNone(adventure.to_key())

    def test_dir(self):
        adventure = self.Adventure(id=1, name='Fun', owner_id=2)
        self.assertTrue({'name', 'owner_id', 'owner', 'save'}.issubset(dir(adventure)))

    def test_to_json(self):
        self.assertEqual(self.attributes, json.loads(self.Adventure(self.attributes).to_json()))

    def test_uri(self):
        class Member(Model):
            pass

        class Quest(self.Adventure):
            pass

        self.assertEqual('/adventures', self.Adventure.uri())
        self.assertEqual('/members', Member.uri())
        self.assertEqual('/adventures', Quest.uri())

    def test_find(self):
        adventure = self.Adventure.find(1)

        self.assertRequested([('GET', '/adventures/1')])
        self.assertIsInstance(adventure, self.Adventure)
        self.assertEqual('Marceline Quest', adventure.name)

    def test_find_missing(self):
        self.assertIs(False, self.Adventure.find(5))

    def test_where(self):
        adventures = self.Adventure.where(type='MATHEMATICAL!')

        self.assertIsInstance(adventures, Collection)
        self.assertEqual([1], [a.id for a in adventures])
        self.assertEqual('type=MATHEMATICAL%21', self.adapter.requests[0].url.split('?')[1])
        self.assertEqual(0, len(self.Adventure.where({"type": "lame"})))

    def test_all(self):
        self.assertEqual(['Marceline Quest'], [a.name for a in self.Adventure.all()])

    def test_create(self):
        adventure = self.Adventure.create(name='City of Thieves', type='lame')

        self.assertEqual(2, adventure.id)
        self.assertEqual('City of Thieves', adventure.name)
        self.assertRequested([('POST', '/adventures')])
        self.assertEqual({"name": "City of Thieves", "type": "lame"}, self.last_request_json())

    def test_create_failure(self):
        self.assertIs(False, self.Adventure.create(type='lame'))

    def test_update(self):
        self.assertIs(True, self.Adventure.update(1, name='Fun'))
        self.assertEqual('Fun', self.adventures[1]['name'])
        self.assertIs(False, self.Adventure.update(5, name='Fun'))

    def test_delete_by_id(self):
        self.assertIs(True, self.Adventure.delete_by_id(1))
        self.assertEqual({}, self.adventures)
        self.assertIs(False, self.Adventure.delete_by_id(1))

    def test_save(self):
        adventure = self.Adventure(self.attributes)
        adventure.name = 'City of Thieves'

        self.assertIs(True, adventure.save())
        self.assertRequested([('PUT', '/adventures/1')])
        self.assertEqual(dict(self.attributes, name='City of Thieves'), self.last_request_json())

    def test_save_savable(self):
        class Quest(Model):
            class Meta:
                uri = '/adventures'
                savable = ('name', 'missing')

        self.registry.add_model(Quest)
        quest = Quest(self.attributes)
        quest.name = 'Fun'
        quest.save()

        self.assertEqual({"name": "Fun"}, self.last_request_json())

    def test_save_new_record(self):
        adventure = self.Adventure(name='City of Thieves', type='lame')

        self.assertIs(True, adventure.save())
        self.assertEqual(2, adventure.id)
        self.assertRequested([('POST', '/adventures')])

    def test_save_failure(self):
        self.assertIs(False, self.Adventure(type='lame').save())
        self.assertIs(False, self.Adventure(id=5, name='Fun').save())

    def test_destroy(self):
        self.assertIs(True, self.Adventure(self.attributes).destroy())
        self.assertRequested([('DELETE', '/adventures/1')])

    def test_reload(self):
        adventure = self.Adventure(id=1, name='Stale')

        self.assertIs(adventure, adventure.reload())
        self.assertEqual('Marceline Quest', adventure.name)
        self.assertEqual('MATHEMATICAL!', adventure.type)
        self.assertRequested([('GET', '/adventures/1')])

    def test_missing_id(self):
        adventure = self.Adventure(name='City of Thieves')

        with self.assertRaises(MissingAttributeError):
            adventure.destroy()
        with self.assertRaises(MissingAttributeError):
            adventure.reload()
        with self.assertRaises(MissingAttributeError):
            self.Adventure.find(None)
        with self.assertRaises(MissingAttributeError):
            self.Adventure.update(None, name='Fun')
        with self.assertRaises(MissingAttributeError):
            self.Adventure.delete_by_id(None)

        self.assertRequested([])
        self.assertEqual(1, len(self.adventures))

    def test_reload_not_an_object(self):
        @self.app.route('/quests/<int:id>')
        def quest(id):
            return jsonify([{"id": id, "name": "Fresh"}])

        @self.registry.add_model
        class Quest(Model):
            class Meta:
                app = 'adventure_app'

        quest = Quest(id=1, name='Stale')

        self.assertIs(False, quest.reload())
        self.assertEqual('Stale', quest.name)
        self.assertRequested([('GET', '/quests/1')])

    def test_reload_failure(self):
        adventure = self.Adventure(id=5, name='Stale')

        self.assertIs(False, adventure.reload())
        self.assertEqual('Stale', adventure.name)
