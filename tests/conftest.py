"""
Shared fixtures: small network and MAC reservation lists.
"""

import pytest

from ipsetgen.models import IPReservation, MACReservationSet, NetworkSpec, RoleReservation


@pytest.fixture
def ctlplane_net():
    return NetworkSpec(
        name="ctlplane",
        cidr="192.168.24.0/24",
        allocation_start="192.168.24.100",
        allocation_end="192.168.24.250",
        gateway="192.168.24.1",
        vlan=0,
        role_reservations={
            "Controller": RoleReservation(
                add_to_predictable_ips=True,
                reservations=[IPReservation(hostname="controller-0", ip="192.168.24.9")],
            ),
        },
    )


@pytest.fixture
def internalapi_net():
    return NetworkSpec(
        name="internalapi",
        cidr="172.17.0.0/24",
        allocation_start="172.17.0.10",
        allocation_end="172.17.0.250",
        vlan=20,
        role_reservations={
            "Controller": RoleReservation(
                add_to_predictable_ips=True,
                reservations=[IPReservation(hostname="controller-0", ip="172.17.0.10")],
            ),
        },
    )


@pytest.fixture
def mac_list():
    return [
        MACReservationSet(reservations={
            "controller-0": {"datacentre": "fa:16:3a:aa:aa:aa"},
            "compute-0": {"datacentre": "fa:16:3a:bb:bb:bb"},
        }),
    ]


@pytest.fixture
def net_list_doc():
    return {
        "apiVersion": "osp-director.openstack.org/v1beta1",
        "kind": "OpenStackNetList",
        "items": [
            {
                "metadata": {"name": "ctlplane"},
                "spec": {
                    "cidr": "192.168.24.0/24",
                    "allocationStart": "192.168.24.100",
                    "allocationEnd": "192.168.24.250",
                    "gateway": "192.168.24.1",
                },
                "status": {
                    "roleReservations": {
                        "Controller": {
                            "addToPredictableIPs": True,
                            "reservations": [
                                {"hostname": "controller-0", "ip": "192.168.24.9", "vip": False, "deleted": False},
                            ],
                        },
                        "openstackclient": {
                            "addToPredictableIPs": False,
                            "reservations": [
                                {"hostname": "openstackclient-0", "ip": "192.168.24.251"},
                            ],
                        },
                    },
                },
            },
            {
                "metadata": {"name": "storagemgmt"},
                "spec": {"cidr": "fd00:fd00:fd00:4000::/64", "vlan": 40},
                "status": {
                    "roleReservations": {
                        "Controller": {
                            "addToPredictableIPs": True,
                            "reservations": [
                                {"hostname": "controller-0", "ip": "fd00:fd00:fd00:4000::10"},
                            ],
                        },
                    },
                },
            },
        ],
    }


@pytest.fixture
def mac_list_doc():
    return {
        "kind": "OpenStackMACAddressList",
        "items": [
            {
                "status": {
                    "macReservations": {
                        "controller-0": {
                            "deleted": False,
                            "reservations": {"datacentre": "fa:16:3a:aa:aa:aa"},
                        },
                    },
                },
            },
        ],
    }
