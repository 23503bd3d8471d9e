import logging
import unittest

from unittest import mock

from mojo.wakeonlan.cli import main
from mojo.wakeonlan.exceptions import DeliveryFailureError
from mojo.wakeonlan.magicpacket import IpProtocol

HWADDR = bytes([0x00, 0x22, 0x44, 0x66, 0x88, 0xAA])


class TestWolCommand(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch("mojo.wakeonlan.cli.send_magic_packet")
        self.mock_send = patcher.start()
        self.addCleanup(patcher.stop)
        return

    def test_default_ipv4(self):
        exit_code = main(["00:22:44:66:88:AA"])
        assert exit_code == 0
        self.mock_send.assert_called_once_with(HWADDR, protocol=IpProtocol.IPV4, ifname=None)
        return

    def test_ipv4_flag(self):
        exit_code = main(["-4", "00-22-44-66-88-aa"])
        assert exit_code == 0
        self.mock_send.assert_called_once_with(HWADDR, protocol=IpProtocol.IPV4, ifname=None)
        return

    def test_ipv6_flag(self):
        exit_code = main(["-6", "00:22:44:66:88:AA"])
        assert exit_code == 0
        self.mock_send.assert_called_once_with(HWADDR, protocol=IpProtocol.IPV6, ifname=None)
        return

    def test_interface_option(self):
        exit_code = main(["-i", "eth0", "00:22:44:66:88:AA"])
        assert exit_code == 0
        self.mock_send.assert_called_once_with(HWADDR, protocol=IpProtocol.IPV4, ifname="eth0")
        return

    def test_verbose_flag(self):
        with mock.patch("mojo.wakeonlan.cli.logging.basicConfig") as basic_config:
            exit_code = main(["-v", "00:22:44:66:88:AA"])
        assert exit_code == 0
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
        return

    def test_default_log_level(self):
        with mock.patch("mojo.wakeonlan.cli.logging.basicConfig") as basic_config:
            main(["00:22:44:66:88:AA"])
        assert basic_config.call_args.kwargs["level"] == logging.INFO
        return

    def test_both_protocol_flags(self):
        with mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                main(["-4", "-6", "00:22:44:66:88:AA"])
        assert ctx.exception.code == 2
        self.mock_send.assert_not_called()
        return

    def test_missing_mac(self):
        with mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        assert ctx.exception.code == 2
        return

    def test_help(self):
        with mock.patch("sys.stdout"):
            with self.assertRaises(SystemExit) as ctx:
                main(["-h"])
        assert ctx.exception.code == 0
        self.mock_send.assert_not_called()
        return

    def test_malformed_mac(self):
        with self.assertLogs(level="ERROR") as logs:
            exit_code = main(["00:22:44:66:88:GG"])
        assert exit_code == 1
        assert "Error during parsing of MAC address" in logs.output[0]
        self.mock_send.assert_not_called()
        return

    def test_delivery_failure(self):
        os_err = OSError(101, "Network is unreachable")
        self.mock_send.side_effect = DeliveryFailureError(
            "Could not deliver magic packet to 255.255.255.255 port 9. [Errno 101] Network is unreachable",
            ("255.255.255.255", 9), os_err)

        with self.assertLogs(level="ERROR") as logs:
            exit_code = main(["00:22:44:66:88:AA"])

        assert exit_code == 1
        assert "Network is unreachable" in logs.output[0]
        return


if __name__ == '__main__':
    unittest.main()
