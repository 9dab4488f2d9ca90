import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FileNode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('type', models.CharField(choices=[('folder', 'Folder'), ('file', 'File'), ('image', 'Image')], max_length=6)),
                ('is_public', models.BooleanField(default=False)),
                ('local_path', models.CharField(blank=True, help_text='Blob location on disk, NULL for folders', max_length=1024, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='file_nodes', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, help_text='Containing folder, NULL for the root', limit_choices_to={'type': 'folder'}, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='children', to='files.filenode')),
            ],
            options={
                'verbose_name': 'File node',
                'verbose_name_plural': 'File nodes',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['owner', 'parent'], name='files_owner_parent_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(models.Q(('local_path__isnull', True), ('type', 'folder')), models.Q(models.Q(('type', 'folder'), _negated=True), ('local_path__isnull', False)), _connector='OR'), name='files_local_path_matches_type')],
            },
        ),
    ]
