from __future__ import annotations


def secret_yaml(name: str, username: str = "u", password: str = "p") -> str:
    return (
        "apiVersion: v1\n"
        "kind: Secret\n"
        "metadata:\n"
        f"  name: {name}\n"
        "type: Opaque\n"
        "stringData:\n"
        f'  username: "{username}"\n'
        f'  password: "{password}"\n'
    )


def host_yaml(name: str, role: str, credentials_name: str) -> str:
    return (
        "apiVersion: metal3.io/v1alpha1\n"
        "kind: BareMetalHost\n"
        "metadata:\n"
        f"  name: {name}\n"
        "spec:\n"
        "  online: true\n"
        f"  hardwareProfile: {role}\n"
        '  bootMACAddress: "52:54:00:00:00:01"\n'
        "  bmc:\n"
        "    address: ipmi://192.168.111.1:6230\n"
        f"    credentialsName: {credentials_name}\n"
    )
