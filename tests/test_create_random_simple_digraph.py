import io
import os
import random
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

import CreateRandomSimpleDiGraph
from CreateRandomSimpleDiGraph import create_graph_file, load_config
from GraphReader import read_graph
from GraphWriter import GRAPH_DIR
from utils.graph_generator import COORDINATE_BOUND


class TestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config = {
            'max_nodes': 8,
            'max_extra_edges': 2,
            'coordinate_bound': 50,
            'output_dir': os.path.join(self.tmp.name, 'graphs'),
        }

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_config(self):
        path = os.path.join(self.tmp.name, 'application.properties')
        with open(path, 'w') as file:
            file.write('[DEFAULT]\ngraph.max_nodes = 100\ngraph.output_dir = out\n')
        config = load_config(path)
        self.assertEqual(config['max_nodes'], 100)
        self.assertEqual(config['output_dir'], 'out')
        self.assertEqual(config['max_extra_edges'], 10)
        self.assertEqual(config['coordinate_bound'], 600)

    def test_load_config_missing_file(self):
        config = load_config(os.path.join(self.tmp.name, 'missing.properties'))
        self.assertEqual(config, {'max_nodes': 5000, 'max_extra_edges': 10, 'coordinate_bound': 600,
                                  'output_dir': 'graphs'})
        self.assertEqual(config['output_dir'], GRAPH_DIR)
        self.assertEqual(config['coordinate_bound'], COORDINATE_BOUND)

    def test_create_graph_file(self):
        out = io.StringIO()
        with redirect_stdout(out):
            filepath = create_graph_file(5, 1, self.config, rng=random.Random(3), progress=False)
        self.assertEqual(filepath, os.path.join(self.config['output_dir'], 'graph_5.txt'))
        self.assertEqual(out.getvalue(), f'Writing Graph with 5 nodes to {filepath}\nDone Creating {filepath}\n')
        g = read_graph(filepath)
        self.assertEqual(g.vertex_count(), 5)
        for v in g.vertices():
            self.assertTrue(0 <= v.x < 50 and 0 <= v.y < 50)

    def run_main(self, answers):
        out = io.StringIO()
        with mock.patch.object(CreateRandomSimpleDiGraph, 'load_config', return_value=self.config), \
                mock.patch('builtins.input', side_effect=answers), redirect_stdout(out):
            CreateRandomSimpleDiGraph.main()
        return out.getvalue()

    def test_main(self):
        self.run_main(['6', '3'])
        g = read_graph(os.path.join(self.config['output_dir'], 'graph_6.txt'))
        self.assertEqual(g.vertex_count(), 6)

    def test_main_defaults(self):
        self.run_main(['', ''])
        self.assertTrue(os.path.exists(os.path.join(self.config['output_dir'], 'graph_8.txt')))

    def test_main_invalid_input(self):
        for answers in (['abc'], ['0'], ['4', '-1'], ['4', 'x']):
            with self.assertRaises(SystemExit) as ctx:
                self.run_main(answers)
            self.assertEqual(ctx.exception.code, 1)

    def test_main_invalid_config(self):
        with open(os.path.join(self.tmp.name, 'application.properties'), 'w') as file:
            file.write('[DEFAULT]\ngraph.max_nodes = many\n')
        out = io.StringIO()
        with mock.patch.object(CreateRandomSimpleDiGraph, 'script_dir', self.tmp.name), \
                mock.patch('builtins.input') as fake_input, redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                CreateRandomSimpleDiGraph.main()
        self.assertEqual(ctx.exception.code, 1)
        self.assertTrue(out.getvalue().startswith('Invalid configuration:'))
        fake_input.assert_not_called()

    def test_main_unwritable_output(self):
        blocker = os.path.join(self.tmp.name, 'blocker')
        with open(blocker, 'w') as file:
            file.write('')
        self.config['output_dir'] = blocker
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(['3', '1'])
        self.assertEqual(ctx.exception.code, 1)
        self.assertFalse(os.path.exists(os.path.join(blocker, 'graph_3.txt')))


if __name__ == '__main__':
    unittest.main()
