
import unittest

from unittest import mock

import netifaces

from click.testing import CliRunner

from mojo.wakeonlan.cli import main
from mojo.wakeonlan.exceptions import ConnectError, SendError
from mojo.wakeonlan.hardwareaddress import HardwareAddress

SAMPLE_MAC = "00:11:22:33:44:55"


class TestCliPositive(unittest.TestCase):

    def setUp(self):
        self._runner = CliRunner()
        return

    def test_default_invocation(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC], env={})

        assert result.exit_code == 0, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_called_once_with(HardwareAddress.parse(SAMPLE_MAC), ip="255.255.255.255", port=9)
        return

    def test_hyphen_mac_with_overrides(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, ["00-11-22-33-44-55", "-i", "192.168.10.255", "-p", "7"])

        assert result.exit_code == 0, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_called_once_with(HardwareAddress.parse(SAMPLE_MAC), ip="192.168.10.255", port=7)
        return

    def test_environment_configuration(self):
        env = {"MOJO_WOL_IP": "10.0.0.255", "MOJO_WOL_PORT": "0"}
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC], env=env)

        assert result.exit_code == 0, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_called_once_with(HardwareAddress.parse(SAMPLE_MAC), ip="10.0.0.255", port=0)
        return

    def test_interface_option(self):
        ifaddrs = {netifaces.AF_INET: [{"addr": "192.168.10.7", "netmask": "255.255.255.0", "broadcast": "192.168.10.255"}]}
        with mock.patch.object(netifaces, "interfaces", return_value=["lo", "eth0"]), \
             mock.patch.object(netifaces, "ifaddresses", return_value=ifaddrs), \
             mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC, "--interface", "eth0"], env={})

        assert result.exit_code == 0, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_called_once_with(HardwareAddress.parse(SAMPLE_MAC), ip="192.168.10.255", port=9)
        return


class TestCliNegative(unittest.TestCase):

    def setUp(self):
        self._runner = CliRunner()
        return

    def test_invalid_mac(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, ["00:11:22:33:44"], env={})

        assert result.exit_code == 2, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_not_called()
        return

    def test_invalid_ip(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC, "--ip", "256.0.0.1"], env={})

        assert result.exit_code == 2, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_not_called()
        return

    def test_leading_zero_ip(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC, "--ip", "010.0.0.1"], env={})

        assert result.exit_code == 2, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_not_called()
        return

    def test_port_out_of_range(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC, "--port", "65536"], env={})

        assert result.exit_code == 2, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_not_called()
        return

    def test_ip_and_interface(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan") as wol:
            result = self._runner.invoke(main, [SAMPLE_MAC, "--ip", "10.0.0.255", "--interface", "eth0"], env={})

        assert result.exit_code == 2, f"Unexpected exit code={result.exit_code} output={result.output}"
        wol.assert_not_called()
        return

    def test_connect_error_reported(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan", side_effect=ConnectError("Network is unreachable")):
            result = self._runner.invoke(main, [SAMPLE_MAC], env={})

        assert result.exit_code == 1, f"Unexpected exit code={result.exit_code} output={result.output}"
        assert "Network is unreachable" in result.output
        return

    def test_send_error_reported(self):
        with mock.patch("mojo.wakeonlan.cli.wake_on_lan", side_effect=SendError("Short send", sent=50, expected=102)):
            result = self._runner.invoke(main, [SAMPLE_MAC], env={})

        assert result.exit_code == 1, f"Unexpected exit code={result.exit_code} output={result.output}"
        assert "Short send" in result.output
        return


if __name__ == '__main__':
    unittest.main()
