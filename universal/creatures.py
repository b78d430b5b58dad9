import os
import json
from universal.files import char_replace


def write_creature(jsondir, struct, basename):
	filename = create_creature_filename(jsondir, struct, basename)
	print("%s: %s" % (basename, struct.get('Name', struct.get('error'))))
	with open(filename, 'w') as fp:
		json.dump(struct, fp, indent=4)
	return filename

def create_creature_filename(jsondir, struct, basename):
	name = struct.get('Name')
	if not name or name == "Unknown" or 'error' in struct:
		name = os.path.splitext(basename)[0]
	title = jsondir + "/" + char_replace(name) + ".json"
	return os.path.abspath(title)
