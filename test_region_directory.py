"""
Region directory tests
- loading, missing / corrupt table errors
- lookups and postal code split
- shared default directory, Config overrides
"""
import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from nik_validators import (
    KKValidator,
    NIKValidator,
    RegionDataError,
    RegionDataNotFoundError,
    RegionDirectory,
    clear_directory_cache,
    get_default_directory,
)
from nik_validators.config import DEFAULT_WILAYAH_PATH, Config
from nik_validators.region_directory import split_sub_district
from nik_validators.utils.logger import mask_number

SAMPLE = {
    'provinsi': {'32': 'JAWA BARAT'},
    'kabkot': {'3273': 'KOTA BANDUNG'},
    'kecamatan': {
        '327301': 'SUKASARI -- 40151',
        '327302': 'COBLONG',
        '327303': ' BABAKAN CIPARAY --  ',
    },
}


class TestSplitSubDistrict(unittest.TestCase):
    """"<name>--<postal>" split"""

    def test_with_postal(self):
        self.assertEqual(split_sub_district('SUKASARI -- 40151'), ('SUKASARI', '40151'))

    def test_without_postal(self):
        self.assertEqual(split_sub_district('COBLONG'), ('COBLONG', None))

    def test_blank_postal(self):
        self.assertEqual(split_sub_district('ANDIR --'), ('ANDIR', ''))

    def test_first_delimiter_only(self):
        self.assertEqual(split_sub_district('A--B--C'), ('A', 'B--C'))


class TestRegionDirectory(unittest.TestCase):
    """In-memory lookups"""

    def setUp(self):
        self.directory = RegionDirectory(SAMPLE)

    def test_lookup(self):
        self.assertEqual(self.directory.lookup('province', '32'), 'JAWA BARAT')
        self.assertEqual(self.directory.lookup('city', '3273'), 'KOTA BANDUNG')
        self.assertEqual(self.directory.lookup('subDistrict', '327301'), 'SUKASARI')
        self.assertEqual(self.directory.lookup('sub_district', '327301'), 'SUKASARI')

    def test_lookup_unknown_code(self):
        self.assertIsNone(self.directory.lookup('province', '99'))
        self.assertIsNone(self.directory.city('9999'))
        self.assertIsNone(self.directory.sub_district('999999'))
        self.assertIsNone(self.directory.postal_code('999999'))

    def test_lookup_unknown_domain(self):
        with self.assertRaises(ValueError):
            self.directory.lookup('village', '32')

    def test_postal_code(self):
        self.assertEqual(self.directory.postal_code('327301'), '40151')
        self.assertIsNone(self.directory.postal_code('327302'))
        self.assertEqual(self.directory.postal_code('327303'), '')

    def test_sub_district_trimmed(self):
        self.assertEqual(self.directory.sub_district('327303'), 'BABAKAN CIPARAY')

    def test_tables_read_only(self):
        with self.assertRaises(TypeError):
            self.directory.provinces['33'] = 'JAWA TENGAH'

    def test_source_mapping_not_shared(self):
        data = json.loads(json.dumps(SAMPLE))
        directory = RegionDirectory(data)
        data['provinsi']['33'] = 'JAWA TENGAH'

        self.assertIsNone(directory.province('33'))

    def test_missing_domain_is_empty(self):
        directory = RegionDirectory({'provinsi': {'32': 'JAWA BARAT'}})

        self.assertEqual(directory.province('32'), 'JAWA BARAT')
        self.assertIsNone(directory.city('3273'))

    def test_rejects_non_object(self):
        with self.assertRaises(RegionDataError):
            RegionDirectory(['32'])
        with self.assertRaises(RegionDataError):
            RegionDirectory({'provinsi': ['32']})

    def test_validator_with_directory(self):
        nik = NIKValidator.set('3273022501990001', directory=self.directory)

        self.assertTrue(nik.validate())
        self.assertEqual(nik.get_sub_district(), 'COBLONG')
        self.assertIsNone(nik.get_postal_code())
        self.assertIsNone(nik.parse().postal_code)


class TestRegionDirectoryLoad(unittest.TestCase):
    """Loading from disk"""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        clear_directory_cache()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)
        clear_directory_cache()

    def _write(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load_bundled(self):
        directory = RegionDirectory.load(DEFAULT_WILAYAH_PATH)

        self.assertEqual(directory.province('31'), 'DKI JAKARTA')
        self.assertEqual(directory.sub_district('317101'), 'GAMBIR')
        self.assertEqual(directory.postal_code('317101'), '10110')

    def test_bundled_table_is_partial(self):
        # Kota Surabaya is listed, its sub-districts are not
        nik = NIKValidator.set('3578012501990001', wilayah_path=DEFAULT_WILAYAH_PATH)

        self.assertIsNotNone(nik.get_city())
        self.assertFalse(nik.validate())
        self.assertEqual(nik.get_validation_errors(), ['Invalid sub-district code'])

    def test_load_custom(self):
        path = self._write('wilayah.json', json.dumps(SAMPLE))
        directory = RegionDirectory.load(path)

        self.assertEqual(directory.source, path)
        self.assertEqual(directory.city('3273'), 'KOTA BANDUNG')

    def test_missing_file(self):
        path = os.path.join(self.tmpdir, 'missing.json')

        with self.assertRaises(RegionDataNotFoundError):
            RegionDirectory.load(path)

    def test_missing_file_is_configuration_error(self):
        path = os.path.join(self.tmpdir, 'missing.json')

        with self.assertRaises(RegionDataError):
            NIKValidator.set('3273012501990001', wilayah_path=path)
        with self.assertRaises(FileNotFoundError):
            KKValidator('3273012501990001', wilayah_path=path)

    def test_corrupt_file(self):
        path = self._write('broken.json', '{"provinsi": {"32": ')

        with self.assertRaises(RegionDataError):
            RegionDirectory.load(path)

    def test_wrong_shape(self):
        path = self._write('list.json', '["32", "33"]')

        with self.assertRaises(RegionDataError):
            RegionDirectory.load(path)

    def test_missing_table_key(self):
        path = self._write('typo.json', json.dumps({'province': {'32': 'JAWA BARAT'}}))

        with self.assertRaises(RegionDataError) as context:
            RegionDirectory.load(path)

        self.assertIn('provinsi', str(context.exception))

    def test_missing_sub_district_table(self):
        data = {'provinsi': SAMPLE['provinsi'], 'kabkot': SAMPLE['kabkot']}
        path = self._write('partial.json', json.dumps(data))

        with self.assertRaises(RegionDataError):
            RegionDirectory.load(path)

    def test_default_directory_shared(self):
        first = get_default_directory()
        second = get_default_directory()

        self.assertIs(first, second)

    def test_default_directory_per_path(self):
        path = self._write('wilayah.json', json.dumps(SAMPLE))

        self.assertIs(get_default_directory(path), get_default_directory(path))
        self.assertIsNot(get_default_directory(path), get_default_directory())

    def test_default_directory_from_environment(self):
        path = self._write('wilayah.json', json.dumps(SAMPLE))

        with patch.dict(os.environ, {Config.WILAYAH_PATH_ENV: path}):
            directory = get_default_directory()

        self.assertEqual(directory.source, os.path.abspath(path))
        self.assertIsNone(directory.province('31'))


class TestConfig(unittest.TestCase):
    """Config getters"""

    def test_defaults(self):
        config = Config(environ={})

        self.assertEqual(config.get_wilayah_path(), DEFAULT_WILAYAH_PATH)
        self.assertEqual(config.get_log_level(), 'INFO')
        self.assertIsNone(config.get_log_file())
        self.assertFalse(config.is_custom_wilayah())

    def test_overrides(self):
        config = Config(environ={
            'NIK_WILAYAH_PATH': '/data/wilayah.json',
            'NIK_LOG_LEVEL': 'debug',
            'NIK_LOG_FILE': 'nik.log',
        })

        self.assertEqual(config.get_wilayah_path(), '/data/wilayah.json')
        self.assertEqual(config.get_log_level(), 'DEBUG')
        self.assertEqual(config.get_log_file(), 'nik.log')
        self.assertTrue(config.is_custom_wilayah())


class TestLogger(unittest.TestCase):
    """Log helpers"""

    def test_mask_number(self):
        self.assertEqual(mask_number('3273012501990001'), '327301****01')
        self.assertEqual(mask_number('1234'), '****')

    def test_load_is_logged(self):
        with self.assertLogs('nik_validators', level='INFO') as captured:
            RegionDirectory.load(DEFAULT_WILAYAH_PATH)

        self.assertTrue(any('Wilayah loaded' in line for line in captured.output))


if __name__ == "__main__":
    unittest.main(verbosity=2)
