from pathlib import Path

import pytest

_CONFIG_IDS = {
    "Debug": "97C147061CF9000F007C117D",
    "Release": "97C147071CF9000F007C117D",
    "Profile": "249021D4217E4FDB00AE95B9",
}

_TEMPLATE = """// !$*UTF8*$!
{{
	archiveVersion = 1;
	classes = {{
	}};
	objectVersion = 54;
	objects = {{

/* Begin PBXNativeTarget section */
		97C146ED1CF9000F007C117D /* {target} */ = {{
			isa = PBXNativeTarget;
			buildConfigurationList = 97C147051CF9000F007C117D /* Build configuration list for PBXNativeTarget "{target}" */;
			buildPhases = (
			);
			buildRules = (
			);
			dependencies = (
			);
			name = {target};
			productName = {target};
			productType = "com.apple.product-type.application";
		}};
/* End PBXNativeTarget section */

/* Begin PBXProject section */
		97C146E61CF9000F007C117D /* Project object */ = {{
			isa = PBXProject;
			buildConfigurationList = 97C146E91CF9000F007C117D /* Build configuration list for PBXProject "{target}" */;
			compatibilityVersion = "Xcode 9.3";
			developmentRegion = en;
			hasScannedForEncodings = 0;
			projectDirPath = "";
			projectRoot = "";
			targets = (
				97C146ED1CF9000F007C117D /* {target} */,
			);
		}};
/* End PBXProject section */

/* Begin XCBuildConfiguration section */
		97C147031CF9000F007C117D /* Debug */ = {{
			isa = XCBuildConfiguration;
			buildSettings = {{
				ALWAYS_SEARCH_USER_PATHS = NO;
				SDKROOT = iphoneos;
			}};
			name = Debug;
		}};
		97C147041CF9000F007C117D /* Release */ = {{
			isa = XCBuildConfiguration;
			buildSettings = {{
				ALWAYS_SEARCH_USER_PATHS = NO;
				SDKROOT = iphoneos;
			}};
			name = Release;
		}};
{target_configs}/* End XCBuildConfiguration section */

/* Begin XCConfigurationList section */
		97C146E91CF9000F007C117D /* Build configuration list for PBXProject "{target}" */ = {{
			isa = XCConfigurationList;
			buildConfigurations = (
				97C147031CF9000F007C117D /* Debug */,
				97C147041CF9000F007C117D /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		}};
		97C147051CF9000F007C117D /* Build configuration list for PBXNativeTarget "{target}" */ = {{
			isa = XCConfigurationList;
			buildConfigurations = (
{config_refs}			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		}};
/* End XCConfigurationList section */
	}};
	rootObject = 97C146E61CF9000F007C117D /* Project object */;
}}
"""


def _ldflags_line(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return f'\t\t\t\tOTHER_LDFLAGS = "{value}";\n'
    items = "".join(f'\t\t\t\t\t"{x}",\n' for x in value)
    return f"\t\t\t\tOTHER_LDFLAGS = (\n{items}\t\t\t\t);\n"


def render_pbxproj(target: str = "Runner", ldflags: dict | None = None) -> str:
    """Render a small but structurally complete project.pbxproj.

    `ldflags` maps configuration name (Debug/Release/Profile) to a list of
    tokens, a plain string, or None to leave the key out.
    """
    if ldflags is None:
        ldflags = {
            "Debug": ["$(inherited)", "-ObjC", "-framework", "Pods_Runner", "-lz"],
            "Release": ["$(inherited)", "-framework", "Pods_Runner"],
            "Profile": None,
        }
    configs = []
    refs = []
    for name, config_id in _CONFIG_IDS.items():
        if name not in ldflags:
            continue
        configs.append(
            f"\t\t{config_id} /* {name} */ = {{\n"
            "\t\t\tisa = XCBuildConfiguration;\n"
            "\t\t\tbuildSettings = {\n"
            f"{_ldflags_line(ldflags[name])}"
            f'\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = "com.example.{target.lower()}";\n'
            "\t\t\t};\n"
            f"\t\t\tname = {name};\n"
            "\t\t};\n"
        )
        refs.append(f"\t\t\t\t{config_id} /* {name} */,\n")
    return _TEMPLATE.format(
        target=target,
        target_configs="".join(configs),
        config_refs="".join(refs),
    )


@pytest.fixture
def write_project(tmp_path):
    """Write `<tmp>/ios/Runner.xcodeproj/project.pbxproj` and return the .xcodeproj path."""

    def _write(target: str = "Runner", ldflags: dict | None = None, name: str = "Runner") -> Path:
        xcodeproj = tmp_path / "ios" / f"{name}.xcodeproj"
        xcodeproj.mkdir(parents=True, exist_ok=True)
        (xcodeproj / "project.pbxproj").write_text(render_pbxproj(target, ldflags), encoding="utf-8")
        return xcodeproj

    return _write
