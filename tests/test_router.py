"""
Tests for argument parsing and the flag table.
"""
import pytest

from unipac.errors import MissingArgumentError, MissingPackageNameError, UnknownFlagError
from unipac.router import FLAG_SPECS, FLAG_TABLE, Backend, Invocation, Operation, parse_args


class TestFlagTable:

    def test_short_and_long_forms_share_an_entry(self):
        for spec in FLAG_SPECS:
            assert FLAG_TABLE[spec.short] is spec
            assert FLAG_TABLE[spec.long] is spec

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FLAG_TABLE['-x'] = FLAG_SPECS[0]

    def test_name_requiring_flags(self):
        needs_name = {spec.short for spec in FLAG_SPECS if spec.needs_name}
        assert needs_name == {'-i', '-iy', '-if', '-is', '-r', '-ry', '-rf', '-rs'}


class TestParseArgs:

    def test_bare_term_is_search(self):
        assert parse_args(['firefox']) == Invocation(Operation.SEARCH, package='firefox')

    def test_only_first_term_is_searched(self):
        assert parse_args(['firefox', 'chromium']).package == 'firefox'

    @pytest.mark.parametrize('argv', [[], [''], ['', 'firefox']])
    def test_missing_argument(self, argv):
        with pytest.raises(MissingArgumentError) as exc:
            parse_args(argv)
        assert exc.value.exit_code == 1

    @pytest.mark.parametrize('argv', [
        ['-x'],
        ['--bogus'],
        ['firefox', '-x'],
        ['-i', 'firefox', '--nope'],
        ['-h', '-'],
    ])
    def test_unknown_flag_anywhere(self, argv):
        with pytest.raises(UnknownFlagError) as exc:
            parse_args(argv)
        assert exc.value.exit_code == 1
        assert exc.value.show_usage

    @pytest.mark.parametrize('flag', ['-h', '--help'])
    def test_help(self, flag):
        assert parse_args([flag]) == Invocation(Operation.HELP)

    @pytest.mark.parametrize('flag', ['-c', '--check-update'])
    def test_check_updates_ignores_extra_argument(self, flag):
        assert parse_args([flag, 'firefox']) == Invocation(Operation.CHECK_UPDATES)

    @pytest.mark.parametrize('flag,backend', [
        ('-uy', Backend.YAY),
        ('--upgrade-flatpak', Backend.FLATPAK),
        ('-us', Backend.SNAP),
    ])
    def test_upgrade_one(self, flag, backend):
        assert parse_args([flag]) == Invocation(Operation.UPGRADE_ONE, backend=backend)

    def test_upgrade_all(self):
        assert parse_args(['--upgrade-all']).operation is Operation.UPGRADE_ALL

    @pytest.mark.parametrize('flag,operation,backend', [
        ('-i', Operation.INSTALL_INTERACTIVE, None),
        ('--install-snap', Operation.INSTALL_ONE, Backend.SNAP),
        ('-r', Operation.REMOVE_INTERACTIVE, None),
        ('-rf', Operation.REMOVE_ONE, Backend.FLATPAK),
    ])
    def test_package_flags(self, flag, operation, backend):
        assert parse_args([flag, 'vlc']) == Invocation(operation, backend=backend, package='vlc')

    @pytest.mark.parametrize('flag', ['-i', '-iy', '-if', '-is', '-r', '-ry', '-rf', '-rs'])
    def test_missing_package_name_is_not_fatal(self, flag):
        with pytest.raises(MissingPackageNameError) as exc:
            parse_args([flag])
        assert exc.value.flag == flag
        assert exc.value.exit_code == 0

    def test_flag_is_not_taken_as_package_name(self):
        with pytest.raises(MissingPackageNameError):
            parse_args(['-iy', '-c'])
