import unittest
import logging
import os
from argparse import Namespace
from unittest.mock import MagicMock, patch

from mediatree import common
from mediatree import config

class TestFilenameNoExt(unittest.TestCase):
    def test_success(self) -> None:
        # call test target
        actual = common.filename_no_ext('/test/path/file.foo')
        self.assertEqual(actual, 'file')

        actual = common.filename_no_ext(__file__)
        self.assertEqual(actual, 'test_common')

class TestConfigureLog(unittest.TestCase):
    def setUp(self) -> None:
        # store the existing log handlers before the configure log function manipulates them
        root = logging.getLogger()
        self._saved_handlers = root.handlers[:]

    def tearDown(self) -> None:
        # restore the orignal log handlers
        root = logging.getLogger()
        root.handlers = self._saved_handlers

    @patch('logging.basicConfig')
    @patch('os.path.exists', return_value=True)
    @patch('os.makedirs')
    def test_configure_log_default(self,
                                   mock_makedirs: MagicMock,
                                   mock_path_exists: MagicMock,
                                   mock_basic_config: MagicMock) -> None:
        '''Tests that a default log configuration is created for the given name.'''
        # call test target
        common.configure_log('test')

        # assert expectation
        LOG_PATH = f"{config.LOG_DIR}/test.log"
        self.assertEqual(mock_basic_config.call_args.kwargs['filename'], LOG_PATH)
        self.assertEqual(mock_basic_config.call_args.kwargs['level'], logging.DEBUG)
        mock_makedirs.assert_not_called()

    @patch('logging.basicConfig')
    @patch('os.path.exists', return_value=False)
    @patch('os.makedirs')
    def test_configure_log_custom_args(self,
                                       mock_makedirs: MagicMock,
                                       mock_path_exists: MagicMock,
                                       mock_basic_config: MagicMock) -> None:
        '''Tests that a custom level is respected and a missing log directory is created.'''
        # call test target
        common.configure_log('test', level=logging.INFO)

        # assert expectation
        LOG_PATH = f"{config.LOG_DIR}/test.log"
        self.assertEqual(mock_basic_config.call_args.kwargs['filename'], LOG_PATH)
        self.assertEqual(mock_basic_config.call_args.kwargs['level'], logging.INFO)
        mock_makedirs.assert_called_once_with(str(config.LOG_DIR))

    @patch('logging.basicConfig')
    @patch('os.path.exists', return_value=True)
    def test_configure_log_module(self,
                                  mock_path_exists: MagicMock,
                                  mock_basic_config: MagicMock) -> None:
        '''Tests that the log file is named after the module path.'''
        common.configure_log_module('/src/mediatree/playlist.py', level=logging.WARNING)

        LOG_PATH = f"{config.LOG_DIR}/playlist.log"
        self.assertEqual(mock_basic_config.call_args.kwargs['filename'], LOG_PATH)
        self.assertEqual(mock_basic_config.call_args.kwargs['level'], logging.WARNING)

class TestNormalizeArgPaths(unittest.TestCase):
    def test_scalar_and_list(self) -> None:
        '''Tests that single paths and lists of paths are both normalized.'''
        args = Namespace(output='/mock/out/../file.xspf', root=['/mock/a/', '/mock//b'])

        common.normalize_arg_paths(args, ['output', 'root'])

        self.assertEqual(args.output, '/mock/file.xspf')
        self.assertListEqual(args.root, ['/mock/a', '/mock/b'])

    def test_none_and_missing_ignored(self) -> None:
        '''Tests that None values and absent attributes are left alone.'''
        args = Namespace(output=None)

        common.normalize_arg_paths(args, ['output', 'skip'])

        self.assertIsNone(args.output)
        self.assertFalse(hasattr(args, 'skip'))

    def test_relative_path(self) -> None:
        args = Namespace(output='out.xspf')
        common.normalize_arg_paths(args, ['output'])
        self.assertEqual(args.output, os.path.join(os.getcwd(), 'out.xspf'))
